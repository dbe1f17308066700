"""Assessment Engine configuration: question set, thresholds, recommendations.

Questions are symptom-based screening prompts derived from published
early-warning-sign lists. They are simplified and intended for education
and awareness, not diagnosis.

Sources:
- Alzheimer's Association. "10 Early Signs and Symptoms of Alzheimer's."
  https://www.alz.org/alzheimers-dementia/10_signs
- Parkinson's Foundation. "10 Early Warning Signs of Parkinson's Disease."
  https://www.parkinson.org/Understanding-Parkinsons/10-Early-Warning-Signs
- Mayo Clinic. "Mild cognitive impairment (MCI)."
- National Institute on Aging (NIA). https://www.nia.nih.gov/health
"""
from dataclasses import dataclass
from typing import Dict, Tuple

from neuroscan.shared.models import Question, RiskTier


@dataclass(frozen=True)
class ScoringThresholds:
    """Inclusive lower bounds for each tier, checked high to low."""
    MODERATE_MIN: int = 9    # 9-15: Screening may be beneficial
    HIGH_MIN: int = 16       # 16+: Consult a healthcare professional

    def __post_init__(self):
        if not 0 < self.MODERATE_MIN < self.HIGH_MIN:
            raise ValueError(
                f"Thresholds must satisfy 0 < MODERATE_MIN < HIGH_MIN, "
                f"got {self.MODERATE_MIN} and {self.HIGH_MIN}"
            )


SCALE_LABELS: Dict[int, str] = {
    0: "Never",
    1: "Sometimes",
    2: "Often",
}

_PROMPTS = (
    # Cognitive
    "Do you often forget recent conversations, appointments, or events?",
    "Do you have trouble finding the right words during conversation?",
    "Do you get lost or confused in familiar places?",
    "Do you have trouble concentrating or following conversations with multiple people?",
    "Do you frequently misplace things and have trouble retracing your steps?",
    # Motor
    "Have you noticed stiffness or rigidity in your arms, legs, or neck?",
    "Do you walk more slowly or with a shuffling gait?",
    "Do you feel off-balance or experience frequent stumbling or unsteadiness?",
    "Have you noticed changes in your handwriting, such as smaller or shakier letters?",
    "Do you experience tremors or involuntary shaking when resting?",
)

QUESTIONS: Tuple[Question, ...] = tuple(
    Question(index=i, text=text) for i, text in enumerate(_PROMPTS, start=1)
)

# Question whose "Often" answer raises the frequent-memory advisory
MEMORY_QUESTION_INDEX = 1

RECOMMENDATIONS: Dict[RiskTier, str] = {
    RiskTier.HIGH: (
        "Your responses suggest significant symptoms. Please consult a healthcare professional.\n"
        ">> In the meantime: Keep a symptom journal, avoid multitasking, and ensure proper sleep.\n"
        "\nSupport Resources:\n"
        "- Alzheimer's Association: 1-800-272-3900 | https://www.alz.org/\n"
        "- Parkinson’s Foundation: https://www.parkinson.org"
    ),
    RiskTier.MODERATE: (
        "Some symptoms are present. A screening may be beneficial.\n"
        ">> Helpful habits: Brain games, exercise, and a Mediterranean diet.\n"
        "\nSupport Resources:\n"
        "- Cleveland Clinic Brain Health: https://my.clevelandclinic.org\n"
        "- AARP Brain Health: https://www.aarp.org/health/brain-health/"
    ),
    RiskTier.LOW: (
        "No significant symptoms detected.\n"
        ">> Tip: Maintain a healthy lifestyle, engage socially, and stay mentally active.\n"
        "\nBrain Health Tips:\n"
        "- Try puzzles and memory games weekly\n"
        "- Stay physically active and socially engaged"
    ),
}

MEMORY_ADVISORY = (
    "Additional Note: Frequent memory issues may be a sign of early cognitive decline.\n"
    ">> Tip: Use reminders, sticky notes, and keep a memory journal."
)

WEEKLY_CHALLENGE = (
    "This week, try learning a new word each day and use it in conversation."
)
