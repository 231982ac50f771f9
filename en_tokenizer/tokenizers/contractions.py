from typing import Optional, Tuple
import re

# Each rule is matched against a whole segment.  When one matches, every group is tokenized on
# its own, so the groups of a rule must always add up to the full segment.
_FLAGS = re.IGNORECASE | re.UNICODE

CONTRACTION_RULES = (
        # Words with apostrophes that must never be split.
        re.compile(r"(fo['’]c['’]sle|rec['’]d|OK['’]d|cc['’]d)", _FLAGS),
        # Auxiliary or modal + not.
        re.compile(r"(are|is|were|was|do|does|did|have|has|had|wo|would|ca|could|sha|should|must|ai|"
                   r"ought|might|need|may)(n['’]t)", _FLAGS),
        # Any stem + clitic, with an optional closing quote or hyphen.
        re.compile(r"(.+)(['’]m|['’]re|['’]ll|['’]ve|['’]d|['’]s)(['’-]?)", _FLAGS),
        # 'twas -> 't was
        re.compile(r"(['’]t)(was)", _FLAGS),
)

PROTECTED_WORDS, NEGATED_AUXILIARY, CLITIC, ARCHAIC_SPLIT = range(len(CONTRACTION_RULES))


class ContractionMatch:
    def __init__(self, rule_index: int, groups: Tuple[str, ...]):
        self.rule_index = rule_index
        self.groups = groups

    def __eq__(self, other):
        if not isinstance(other, ContractionMatch):
            return NotImplemented
        return self.rule_index == other.rule_index and self.groups == other.groups

    def __repr__(self):
        return 'ContractionMatch(%d, %r)' % (self.rule_index, self.groups)


def match_contraction(segment: str) -> Optional[ContractionMatch]:
    """
    Tries the contraction rules in priority order and returns the first one that matches the
    whole of ``segment``, or ``None``.  Rule order matters: "rec'd" also looks like a stem plus
    the "'d" clitic, but it's a protected word, so it stays in one piece.
    """
    for rule_index, rule in enumerate(CONTRACTION_RULES):
        match = rule.fullmatch(segment)
        if match is not None:
            return ContractionMatch(rule_index, match.groups())
    return None
