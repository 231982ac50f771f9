from typing import List

import regex

# Anything that starts with a protocol or "www.", up to the last character that can plausibly
# end a URL (so a full stop, closing bracket or trailing hyphen right after the URL stays its own
# token).
URL_PATTERN = (r"(?:(?:https?|ftps?)://|www\d{0,3}\.)"
               r"[\p{L}\p{M}\p{N}\-._~:/?#\[\]@!$&'*+,;=%()]*"
               r"[\p{L}\p{M}\p{N}/#=_~]")
# An address never starts with a hyphen, so "-john@x.com" leaves the hyphen to itself.
EMAIL_PATTERN = (r"(?<![\p{L}\p{N}._%+])"
                 r"[\p{L}\p{N}_%+][\p{L}\p{N}._%+\-]*@[\p{L}\p{N}.\-]+\.\p{L}{2,}"
                 r"(?![\p{L}\p{N}])")
URL_OR_EMAIL = regex.compile("(?:" + URL_PATTERN + ")|(?:" + EMAIL_PATTERN + ")", flags=regex.IGNORECASE)


def join_emails_and_urls(tokens: List[str]) -> List[str]:
    """
    The delimiter splitter breaks email addresses and URLs apart at every ``.``, ``/`` and
    ``:``.  This glues the pieces back together: we look for addresses and URLs in the
    concatenated text, and any match that starts and ends on token boundaries becomes a single
    token.  Matches that cut through the middle of a token are left alone, so the output always
    concatenates to the same text as the input.
    """
    text = "".join(tokens)
    if "@" not in text and "www" not in text.lower() and "://" not in text:
        return list(tokens)
    boundaries = {}
    offset = 0
    for index, token in enumerate(tokens):
        boundaries[offset] = index
        offset += len(token)
    boundaries[offset] = len(tokens)

    joined_tokens = []
    next_token = 0
    for match in URL_OR_EMAIL.finditer(text):
        start = boundaries.get(match.start())
        end = boundaries.get(match.end())
        if start is None or end is None or start < next_token or end - start < 2:
            continue
        joined_tokens.extend(tokens[next_token:start])
        joined_tokens.append("".join(tokens[start:end]))
        next_token = end
    joined_tokens.extend(tokens[next_token:])
    return joined_tokens
