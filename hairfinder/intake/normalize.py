"""
Answer Normalizer

Maps quiz labels for protective styles and scalp areas onto the stable
identifiers used by the style risk table.

Rules are tried in declared order and the first match wins. The order is
fixed: the generic cornrow, glued wig and locs rules sit above the
Ghana weaving, crochet, glueless wig and faux locs rules they overlap with,
so those labels resolve to the broader (higher risk) identifier.
Unmatched labels fall back to a slug of the lower-cased text.
"""

import re
from typing import Any, Dict, List, Optional, Tuple

from .patterns import compile_patterns

_SLUG_RE = re.compile(r"[^a-z0-9_]+")


# ============================================================================
# RULE TABLES
# ============================================================================

STYLE_RULES: List[Tuple[str, list]] = [
    ("allback_cornrows", compile_patterns(r"all[- ]?back|cornrows|weaving")),
    ("box_braids", compile_patterns(r"\bbox braids\b")),
    ("one_million_braids", compile_patterns(r"million braids")),
    ("micro_twists", compile_patterns(r"micro twists")),
    ("ghana_weaving", compile_patterns(r"ghana weaving|shuku")),
    ("weaves", compile_patterns(r"weaves.*sewn|fixing")),
    ("wigs_glue", compile_patterns(r"wigs.*glue|frontal|lace")),
    ("wigs_no_glue", compile_patterns(r"wigs.*without|closure|headband")),
    ("crochet", compile_patterns(r"crochet")),
    ("twists_senegalese", compile_patterns(r"twists.*senegalese|senegalese twists|^twists\b")),
    ("dreadlocs", compile_patterns(r"dreadlocs|locs")),
    ("faux_locs", compile_patterns(r"faux locs")),
    ("threading_didi", compile_patterns(r"threading|kiko|didi")),
    ("tight_ponytails", compile_patterns(r"tight ponytails|packing gel")),
    ("natural_hair", compile_patterns(r"natural hair")),
]

AREA_RULES: List[Tuple[str, list]] = [
    ("edges", compile_patterns(r"edge")),
    ("temples", compile_patterns(r"temple")),
    ("crown", compile_patterns(r"crown|top|center")),
    ("nape", compile_patterns(r"nape|back of neck")),
    ("patches", compile_patterns(r"patch")),
    ("overall", compile_patterns(r"even thinning|all over|overall")),
]

# Quiz display label per identifier. Labels shadowed by an earlier rule
# (see STYLE_RULES) normalize to that rule's identifier.
STYLE_LABELS: Dict[str, str] = {
    "allback_cornrows": "Cornrows (scalp braids/straight backs)",
    "box_braids": "Box braids (individual plaits)",
    "one_million_braids": "One million braids",
    "micro_twists": "Micro twists",
    "ghana_weaving": "Ghana weaving/Shuku (raised cornrow styles)",
    "weaves": "Weaves/sew-ins (hair sewn onto cornrowed base)",
    "wigs_glue": "Frontal/full lace wigs (uses glue)",
    "wigs_no_glue": "Closure wigs or frontal (no glue/tape)",
    "crochet": "Crochet styles (hair crocheted into cornrows)",
    "twists_senegalese": "Twists (two-strand twists, Senegalese twists)",
    "faux_locs": "Faux locs or passion twists",
    "dreadlocs": "Dreadlocs",
    "threading_didi": "Threading (Kiko/Didi)",
    "tight_ponytails": 'Tight ponytails or high buns ("puff" or slicked edges)',
    "natural_hair": "Natural hair out (afro, wash-and-go, twist-out)",
}

AREA_LABELS: Dict[str, str] = {
    "edges": "Edges (front hairline)",
    "temples": "Temples (sides of hairline)",
    "crown": "Crown (top/center of head)",
    "nape": "Nape (back of neck)",
    "patches": "Patches throughout scalp",
    "overall": "Even thinning all over",
}


def slugify(label: str) -> str:
    """Lower-case and collapse every non [a-z0-9_] run into one underscore."""
    return _SLUG_RE.sub("_", str(label).lower())


def _normalize_label(label: str, rules: List[Tuple[str, list]]) -> str:
    s = str(label).lower()
    for identifier, patterns in rules:
        if any(p.search(s) for p in patterns):
            return identifier
    return slugify(s)


def normalize_protective_styles(labels: Optional[List[str]] = None) -> List[str]:
    """Normalize protective-style labels to style identifiers."""
    return [_normalize_label(label, STYLE_RULES) for label in labels or []]


def normalize_scalp_areas(labels: Optional[List[str]] = None) -> List[str]:
    """Normalize scalp-area labels to area identifiers."""
    return [_normalize_label(label, AREA_RULES) for label in labels or []]


def normalize_answers(answers: Dict[str, Any]) -> Dict[str, Any]:
    """
    Normalize the style/area fields of a recommendation-engine input.

    Only `protectiveStyles` and `scalpAreas` are rewritten; the remaining
    fields pass through unchanged.
    """
    return {
        "protectiveStyles": normalize_protective_styles(answers.get("protectiveStyles") or []),
        "scalpAreas": normalize_scalp_areas(answers.get("scalpAreas") or []),
        "ageRange": answers.get("ageRange"),
        "whenNoticed": answers.get("whenNoticed"),
        "primaryConcern": answers.get("primaryConcern"),
    }
