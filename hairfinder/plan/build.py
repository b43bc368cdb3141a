"""
Treatment Plan Builder

Emits treatment steps in a fixed care-pathway order: scalp health first,
then the primary diagnosis, then habits, then cleansing, and finally the
expected-results timeline. Every guard is evaluated; the list is never
re-sorted by priority afterwards.

Version: treatment_plan_v1
"""

from typing import List

from hairfinder.diagnosis.models import Diagnosis
from hairfinder.intake.answers import AnswerSet
from hairfinder.intake.patterns import matches_any, any_item_matches

from .models import StepPriority, TreatmentPlanStep

# Option ids for the habit questions
NIGHT_RISK_OPTIONS = ("wig-on", "no-cotton")
COVERED_NO_ISSUES = "no-issues"
INFREQUENT_WASH_OPTIONS = ("less-than-monthly", "only-takedown")


def _step(priority: StepPriority, title: str, action: str, product: str) -> TreatmentPlanStep:
    return TreatmentPlanStep(priority=priority, title=title, action=action, product=product)


def _scalp_steps(answers: AnswerSet) -> List[TreatmentPlanStep]:
    steps = []
    scalp_issues = answers.items("scalp-issues-detailed")
    if any_item_matches(scalp_issues, [r"ringworm|sores|infection"]):
        steps.append(_step(
            StepPriority.URGENT,
            "Scalp Healing Protocol",
            "See a dermatologist for infection treatment. After clearance, begin "
            "Fulani Hair Gro to support follicle recovery.",
            "Medical treatment first, then Fulani Hair Gro",
        ))
    if any_item_matches(scalp_issues, [r"dandruff|itch"]):
        steps.append(_step(
            StepPriority.HIGH,
            "Scalp Soothing Routine",
            "Apply Fulani Hair Gro to scalp 3x weekly. Use gentle sulfate-free shampoo "
            "to calm irritation and reduce flaking.",
            "Fulani Hair Gro + gentle sulfate-free shampoo",
        ))
    return steps


def _diagnosis_steps(diagnosis: Diagnosis, answers: AnswerSet) -> List[TreatmentPlanStep]:
    steps = []
    life_events = answers.items("life-events-2years")

    if diagnosis.primary_key == "traction":
        styles = answers.items("protective-styles-often")
        if any_item_matches(styles, [r"tight ponytails|frontal wigs"]):
            action = "Immediately stop tight ponytails and frontal wigs. Give edges a 3-month break."
        else:
            action = "Loosen braids/cornrows and request low-tension styles from your stylist."
        steps.append(_step(
            StepPriority.HIGH,
            "Stop Further Damage",
            action,
            "Edge-friendly styling products (non-alcohol)",
        ))
        steps.append(_step(
            StepPriority.HIGH,
            "Follicle Reactivation",
            "Massage Fulani Hair Gro into edges and affected areas 2x daily to boost "
            "circulation and block DHT locally.",
            "Fulani Hair Gro (Edge Recovery Focus)",
        ))

    elif diagnosis.primary_key == "telogen":
        if any_item_matches(life_events, [r"postpartum"]):
            action = (
                "Use a postnatal multivitamin with iron. Apply Fulani Hair Gro to support "
                "recovery from postpartum shedding."
            )
        else:
            action = (
                "Reduce stress (sleep, breathwork, light exercise). Use Fulani Hair Gro to "
                "help shift follicles back to growth."
            )
        steps.append(_step(
            StepPriority.HIGH,
            "Nutrient Replenishment",
            action,
            "Fulani Hair Gro + multivitamin with iron",
        ))

    elif diagnosis.primary_key == "androgenic":
        steps.append(_step(
            StepPriority.HIGH,
            "DHT Blocking Protocol",
            "Apply Fulani Hair Gro 2x daily to the scalp for natural DHT modulation and "
            "improved density.",
            "Fulani Hair Gro (DHT Blocking Focus)",
        ))
        if any_item_matches(life_events, [r"menopause|perimenopause"]):
            steps.append(_step(
                StepPriority.MEDIUM,
                "Hormonal Support",
                "Discuss hormonal options with your doctor. Continue topical routine consistently.",
                "Medical consultation + Fulani Hair Gro",
            ))

    return steps


def _habit_steps(answers: AnswerSet) -> List[TreatmentPlanStep]:
    steps = []

    bonnet = answers.option("sleep-bonnet")
    if bonnet in NIGHT_RISK_OPTIONS:
        if bonnet == "wig-on":
            action = "Never sleep with a wig on. Switch to silk/satin bonnet or pillowcase immediately."
        else:
            action = "Replace cotton pillowcases with silk/satin to minimize friction and breakage."
        steps.append(_step(
            StepPriority.MEDIUM,
            "Night-Time Protection",
            action,
            "Silk bonnet + satin pillowcase",
        ))

    covered = answers.option("covered-hair-effects")
    if covered and covered != COVERED_NO_ISSUES:
        steps.append(_step(
            StepPriority.MEDIUM,
            "Scalp Breathing Time",
            "Give your scalp daily breaks. Remove wigs/scarves 2-3 hours to reduce "
            "irritation and improve airflow.",
            "Low-manipulation natural styles",
        ))

    if answers.option("wash-frequency") in INFREQUENT_WASH_OPTIONS:
        steps.append(_step(
            StepPriority.MEDIUM,
            "Scalp Cleansing Routine",
            "Wash at least every 2 weeks. Clean scalp prevents clogging and supports "
            "growth. Use sulfate-free shampoo.",
            "Gentle sulfate-free shampoo",
        ))

    return steps


def expected_timeline(noticed: str) -> str:
    if matches_any(noticed, [r"less than 3", r"^3-6"]):
        return "2-3 months of consistent use"
    if matches_any(noticed, [r"6-12"]):
        return "3-4 months of consistent use"
    return "4-6 months of consistent use (longer-term issues take longer to reverse)"


def build_treatment_plan(diagnosis: Diagnosis, answers) -> List[TreatmentPlanStep]:
    """
    Build the ordered treatment plan.

    The final step is always the INFO expected-results timeline.
    """
    answers = AnswerSet.from_payload(answers)
    plan: List[TreatmentPlanStep] = []

    plan.extend(_scalp_steps(answers))
    plan.extend(_diagnosis_steps(diagnosis, answers))
    plan.extend(_habit_steps(answers))

    noticed = answers.text("noticed-when")
    plan.append(_step(
        StepPriority.INFO,
        "Expected Results Timeline",
        f"Based on how long you've had this issue ({noticed or 'recently'}), "
        f"expect visible results in {expected_timeline(noticed)}.",
        "Consistency is key",
    ))

    return plan
