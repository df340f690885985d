# services/neurotransmitter_engine/profiles.py
# Static descriptive text per neurotransmitter system, consumed by the
# interpretation composer and the Markdown narrator.

from typing import Dict, Any

NEUROTRANSMITTER_PROFILES: Dict[str, Dict[str, Any]] = {
    "dopamine": {
        "name": "Dopamine",
        "function": "Associated with motivation, focus, reward, and drive",
        "dominant_traits": [
            "Strong motivation and drive",
            "Goal-oriented thinking and behavior",
            "Analytical and logical approach",
            "Strong focus on tasks and objectives",
            "Preference for structure and organization"
        ],
        "deficiency_traits": [
            "Difficulty initiating or completing tasks",
            "Reduced motivation and drive",
            "Problems with focus and concentration",
            "Fatigue and low energy",
            "Anhedonia (reduced ability to experience pleasure)"
        ],
        "clinical_considerations": [
            "Dopaminergic pathways influence executive function, motivation, and reward processing",
            "Imbalances may present as difficulties with attention, motivation, and energy regulation",
            "Consider impact on treatment adherence and goal-directed behaviors",
            "May influence response to stimulant medications and dopaminergic agents"
        ],
        "prescribing_implications": [
            "Dopamine deficiency patterns may respond to dopaminergic agents or stimulants when clinically indicated",
            "Consider potential impact on medication adherence and treatment engagement",
            "Dominant dopamine nature may suggest heightened sensitivity to dopaminergic agents",
            "May influence therapeutic response to medications affecting dopamine pathways"
        ]
    },
    "acetylcholine": {
        "name": "Acetylcholine",
        "function": "Associated with learning, memory, creativity, and cognitive processing",
        "dominant_traits": [
            "Strong memory and recall abilities",
            "Creative and innovative thinking",
            "Detail-oriented perception",
            "Intellectual curiosity",
            "Artistic or creative tendencies"
        ],
        "deficiency_traits": [
            "Memory difficulties and forgetfulness",
            "Reduced cognitive processing speed",
            "Difficulty learning new information",
            "Word-finding problems",
            "Reduced creative thinking"
        ],
        "clinical_considerations": [
            "Cholinergic pathways influence memory formation, cognitive processing, and creative thinking",
            "Imbalances may present as cognitive difficulties, memory issues, or reduced creative capacity",
            "Consider impact on learning and information processing",
            "May influence cognitive side effects of medications"
        ],
        "prescribing_implications": [
            "Acetylcholine deficiency patterns may benefit from cholinergic agents when clinically indicated",
            "Consider potential anticholinergic burden when prescribing multiple medications",
            "Dominant acetylcholine nature may suggest heightened sensitivity to anticholinergic side effects",
            "May influence cognitive side effect profiles of various medications"
        ]
    },
    "gaba": {
        "name": "GABA",
        "function": "Associated with calm, stability, relaxation, and stress management",
        "dominant_traits": [
            "Natural calmness and stability",
            "Steady and methodical approach",
            "Patience and persistence",
            "Reliable and consistent behavior",
            "Ability to manage stress effectively"
        ],
        "deficiency_traits": [
            "Anxiety and tension",
            "Difficulty relaxing or unwinding",
            "Sleep disturbances",
            "Feeling overwhelmed by stress",
            "Restlessness and irritability"
        ],
        "clinical_considerations": [
            "GABAergic pathways influence anxiety regulation, stress response, and sleep",
            "Imbalances may present as anxiety, tension, irritability, or sleep disturbances",
            "Consider impact on stress tolerance and emotional regulation",
            "May influence response to anxiolytic medications"
        ],
        "prescribing_implications": [
            "GABA deficiency patterns may respond to GABAergic agents when clinically indicated",
            "Consider potential for tolerance and dependence with GABAergic medications",
            "Dominant GABA nature may suggest different dose requirements for anxiolytic medications",
            "May influence side effect profiles and therapeutic response to various psychotropic medications"
        ]
    },
    "serotonin": {
        "name": "Serotonin",
        "function": "Associated with mood regulation, social connection, and emotional balance",
        "dominant_traits": [
            "Natural optimism and positive outlook",
            "Strong social connections and interpersonal skills",
            "Emotional resilience and adaptability",
            "Sense of contentment and well-being",
            "Balanced emotional responses"
        ],
        "deficiency_traits": [
            "Depressed mood or emotional flatness",
            "Social withdrawal or isolation",
            "Emotional sensitivity or reactivity",
            "Sleep disturbances",
            "Rumination and negative thought patterns"
        ],
        "clinical_considerations": [
            "Serotonergic pathways influence mood regulation, social behavior, and emotional processing",
            "Imbalances may present as mood disturbances, social difficulties, or emotional dysregulation",
            "Consider impact on interpersonal functioning and emotional resilience",
            "May influence response to serotonergic medications"
        ],
        "prescribing_implications": [
            "Serotonin deficiency patterns may respond to serotonergic agents when clinically indicated",
            "Consider potential for serotonin syndrome when combining multiple serotonergic medications",
            "Dominant serotonin nature may suggest different dose requirements for serotonergic medications",
            "May influence side effect profiles and therapeutic response to antidepressant medications"
        ]
    }
}

# Fixed narrative used wherever no system-specific text applies.
BALANCED_PROFILE_TEXT = (
    "No clearly dominant neurotransmitter pattern was identified. This may suggest a balanced "
    "neurochemical profile or insufficient data to determine dominance."
)

NO_DEFICIENCY_TEXT = (
    "No significant neurotransmitter deficiency patterns were identified. This suggests relatively "
    "balanced neurochemical functioning across all assessed neurotransmitter systems."
)

STABLE_PATTERN_TEXT = (
    "There are no extreme imbalances between dominance and deficiency scores across the "
    "neurotransmitter systems. This suggests a relatively stable neurochemical profile without "
    "dramatic fluctuations between baseline functioning and current state."
)

GENERAL_PRESCRIBING_CONSIDERATIONS = [
    "Consider starting with lower doses and titrating gradually when introducing new medications",
    "Monitor for both therapeutic effects and side effects that may be influenced by the identified neurochemical patterns",
    "Reassess periodically as neurochemical patterns may shift with treatment and life circumstances",
    "Consider integrating non-pharmacological approaches that target identified neurochemical patterns",
]

CLINICAL_DISCLAIMER = (
    "This assessment provides correlational data that may inform clinical decision-making but should be "
    "integrated with comprehensive evaluation. Results should be interpreted within the context of the "
    "client's full clinical presentation, history, and other assessment findings. This tool is designed to "
    "facilitate clinical communication between PhD counselors and prescribers."
)
