"""
Hair Finder Questionnaire Schema

This module contains QUESTIONNAIRE_SCHEMA: the quiz questions served to the
front-end, with a stable option id (`value`) and a display `label` per option.

The scoring rules match option wording, so the catalog is also the shim that
lets callers send either option ids or the legacy label text.
"""

from typing import Any, Dict, List, Optional


def _options(*pairs) -> List[Dict[str, str]]:
    return [{"value": value, "label": label} for value, label in pairs]


# ============================================================================
# QUESTIONNAIRE SCHEMA
# ============================================================================

QUESTIONNAIRE_SCHEMA: Dict[str, Any] = {
    "version": "1.0.0",
    "description": "Hair loss assessment questionnaire for the Hair Finder funnel",
    "questions": [
        # ===== ABOUT YOU =====
        {
            "id": "age-range",
            "section": "about_you",
            "type": "single",
            "title": "What is your age range?",
            "description": "Age helps us understand hormonal factors",
            "options": _options(
                ("18-25", "18-25 years"),
                ("26-35", "26-35 years"),
                ("36-45", "36-45 years"),
                ("46-55", "46-55 years (perimenopause/menopause)"),
                ("56-plus", "56+ years"),
            ),
        },
        {
            "id": "primary-concern",
            "section": "about_you",
            "type": "single",
            "title": "What brings you here today? (Select your PRIMARY concern)",
            "description": "Choose the ONE issue that concerns you most",
            "options": _options(
                ("thinning-edges", "Thinning edges or receding hairline"),
                ("bald-patches", "Bald patches or areas with no hair growth"),
                ("overall-thinning", "Overall thinning across the scalp"),
                ("excessive-shedding", "Excessive shedding (hair falls out in clumps)"),
                ("breakage", "Breakage (hair snaps when styling/combing)"),
                ("length-plateau", "Hair won't grow past a certain length"),
                ("scalp-issues", "Scalp issues (itching, flaking, sores)"),
            ),
        },
        # ===== HAIR LOSS PATTERN =====
        {
            "id": "noticed-when",
            "section": "pattern",
            "type": "single",
            "title": "When did you first notice these concerns?",
            "options": _options(
                ("less-than-3-months", "Less than 3 months ago"),
                ("3-6-months", "3-6 months ago"),
                ("6-12-months", "6-12 months ago"),
                ("1-2-years", "1-2 years ago"),
                ("more-than-2-years", "More than 2 years ago"),
                ("not-sure", "I'm not sure"),
            ),
        },
        {
            "id": "affected-areas",
            "section": "pattern",
            "type": "multiple",
            "title": "Which part of your scalp is most affected?",
            "description": "Select all areas where you're experiencing issues",
            "options": _options(
                ("edges", "Edges (front hairline)"),
                ("temples", "Temples (sides of hairline)"),
                ("crown", "Crown (top/center of head)"),
                ("nape", "Nape (back of neck)"),
                ("patches", "Patches throughout scalp"),
                ("overall", "Even thinning all over"),
            ),
        },
        {
            "id": "shedding-vs-breakage",
            "section": "pattern",
            "type": "single",
            "title": "How would you describe what's happening to your hair?",
            "description": "This helps us determine if it's shedding or breakage",
            "options": _options(
                ("shedding", "Hair falls out from the root (long strands with white bulb at the end)"),
                ("breakage", "Hair breaks off at different lengths (short pieces, no bulb, rough ends)"),
                ("both", "Both falling out and breaking"),
                ("not-sure", "I'm not sure"),
            ),
        },
        {
            "id": "length-distribution",
            "section": "pattern",
            "type": "single",
            "title": "Which part of your hair is the longest? Which is the shortest?",
            "options": _options(
                ("crown-longest", "Crown is longest, edges are shortest"),
                ("nape-longest", "Back/nape is longest, front is shortest"),
                ("sides-longest", "Sides are longest, middle is shortest"),
                ("even-length", "All relatively the same length"),
                ("too-short", "Hair is too short to tell"),
            ),
        },
        # ===== STYLING HABITS & TRACTION =====
        {
            "id": "protective-styles-often",
            "section": "styling",
            "type": "multiple",
            "title": "What protective styles do you wear most often?",
            "description": "Select all that apply - this helps us understand tension on your hairline",
            "options": _options(
                ("box-braids", "Box braids (individual plaits)"),
                ("cornrows", "Cornrows (scalp braids/straight backs)"),
                ("knotless-braids", "Knotless braids (less tension than box braids)"),
                ("weaves", "Weaves/sew-ins (hair sewn onto cornrowed base)"),
                ("glued-wigs", "Frontal/full lace wigs (uses glue)"),
                ("glueless-wigs", "Closure wigs or frontal (no glue/tape)"),
                ("ghana-weaving", "Ghana weaving/Shuku (raised cornrow styles)"),
                ("faux-locs", "Faux locs or passion twists"),
                ("crochet", "Crochet styles (hair crocheted into cornrows)"),
                ("tight-ponytails", 'Tight ponytails or high buns ("puff" or slicked edges)'),
                ("twists", "Twists (two-strand twists, Senegalese twists)"),
                ("natural-hair", "Natural hair out (afro, wash-and-go, twist-out)"),
                ("relaxed", "Relaxed/texturized hair (chemically straightened)"),
                ("minimal-styling", "I don't style my hair much"),
            ),
        },
        {
            "id": "covered-hair-effects",
            "section": "styling",
            "type": "single",
            "title": "When your hair is covered (wig, scarf, bonnet), what happens?",
            "options": _options(
                ("itchy", "My scalp gets itchy or irritated"),
                ("flaking", "I notice more flaking or dandruff"),
                ("sweating", "My scalp sweats excessively"),
                ("worse", "Scalp issues get worse"),
                ("no-issues", "No issues - my scalp feels fine"),
                ("not-covered", "I don't cover my hair regularly"),
            ),
        },
        {
            "id": "sleep-bonnet",
            "section": "styling",
            "type": "single",
            "title": "Do you sleep with a silk/satin bonnet or pillowcase?",
            "options": _options(
                ("always", "Yes, always"),
                ("sometimes", "Sometimes"),
                ("no-cotton", "No, I use cotton"),
                ("wig-on", "I sleep with my wig/weave on"),
            ),
        },
        # ===== SCALP HEALTH =====
        {
            "id": "scalp-issues-detailed",
            "section": "scalp",
            "type": "multiple",
            "title": "Are you experiencing any scalp issues?",
            "description": "Select all that apply",
            "options": _options(
                ("dandruff", "Dandruff (white flakes)"),
                ("itchy", "Itchy scalp"),
                ("tender", "Painful or tender spots"),
                ("ringworm", "Ringworm or fungal infection"),
                ("sores", "Sores or scabs"),
                ("oily", "Excessive oiliness"),
                ("dry", "Very dry, tight scalp"),
                ("none", "No scalp issues"),
            ),
        },
        {
            "id": "wash-frequency",
            "section": "scalp",
            "type": "single",
            "title": "How often do you wash your hair?",
            "options": _options(
                ("weekly", "Once a week or more"),
                ("every-2-weeks", "Every 2 weeks"),
                ("monthly", "Once a month"),
                ("less-than-monthly", "Less than once a month"),
                ("only-takedown", "Only when I take down my protective style"),
            ),
        },
        # ===== HORMONAL & MEDICAL HISTORY =====
        {
            "id": "life-events-2years",
            "section": "medical",
            "type": "multiple",
            "title": "Have you experienced any of these life events in the past 2 years?",
            "description": "Select all that apply",
            "options": _options(
                ("pregnancy", "Pregnancy"),
                ("postpartum", "Postpartum (after giving birth)"),
                ("breastfeeding", "Breastfeeding"),
                ("menopause", "Menopause or perimenopause"),
                ("hot-flashes", "Hot flashes or night sweats"),
                ("surgery-illness", "Major surgery or illness"),
                ("stress-trauma", "Significant stress or trauma"),
                ("birth-control", "Started or stopped birth control"),
                ("none", "None of these"),
            ),
        },
        {
            "id": "family-history-detailed",
            "section": "medical",
            "type": "single",
            "title": "Does hair loss run in your family?",
            "options": _options(
                ("mother", "Yes - my mother has thinning hair or thin edges"),
                ("father", "Yes - my father is bald or has significant hair loss"),
                ("both-parents", "Yes - both parents"),
                ("relatives", "Yes - siblings or other relatives"),
                ("none", "No family history of hair loss"),
                ("not-sure", "I'm not sure"),
            ),
        },
        {
            "id": "diagnosed-conditions",
            "section": "medical",
            "type": "multiple",
            "title": "Have you been diagnosed with any of these conditions?",
            "description": "Select all that apply",
            "options": _options(
                ("thyroid", "Thyroid issues (hypo/hyperthyroidism)"),
                ("anemia", "Anemia (low iron)"),
                ("pcos", "PCOS (Polycystic Ovary Syndrome)"),
                ("diabetes", "Diabetes"),
                ("autoimmune", "Autoimmune condition"),
                ("vitamin-deficiency", "Vitamin/mineral deficiency"),
                ("none", "None of these"),
                ("not-tested", "Not sure/haven't been tested"),
            ),
        },
        # ===== GOALS =====
        {
            "id": "primary-goal",
            "section": "goals",
            "type": "single",
            "title": "What is your #1 hair goal right now?",
            "options": _options(
                ("regrow-edges", "Regrow my edges and hairline"),
                ("stop-breakage", "Stop hair from breaking and shedding"),
                ("fill-patches", "Fill in bald patches"),
                ("grow-longer", "Grow my hair longer and thicker"),
                ("heal-scalp", "Heal my scalp issues"),
                ("maintain", "Maintain healthy hair and prevent future loss"),
            ),
        },
    ],
}

_QUESTIONS_BY_ID: Dict[str, Dict[str, Any]] = {
    q["id"]: q for q in QUESTIONNAIRE_SCHEMA["questions"]
}


def get_question(question_id: str) -> Optional[Dict[str, Any]]:
    """Return the catalog entry for a question id, or None if unknown."""
    return _QUESTIONS_BY_ID.get(question_id)


def resolve_option(question_id: str, value: str) -> Optional[Dict[str, str]]:
    """
    Find the option a submitted value refers to.

    A value matches an option when it equals the option id, or equals the
    option label ignoring case and surrounding whitespace.
    """
    question = _QUESTIONS_BY_ID.get(question_id)
    if not question or not isinstance(value, str):
        return None

    needle = value.strip()
    for option in question.get("options", []):
        if option["value"] == needle:
            return option
    lowered = needle.lower()
    for option in question.get("options", []):
        if option["label"].lower() == lowered:
            return option
    return None


def get_questionnaire_response() -> Dict[str, Any]:
    """Get the questionnaire schema for frontend form generation."""
    return QUESTIONNAIRE_SCHEMA
