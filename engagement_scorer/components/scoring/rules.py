"""Scoring constants: marker tables, sub-criterion caps, and tier thresholds.

Every marker is a lowercase phrase matched as a substring of the lowercased
message unless noted otherwise.
"""

VALID_ROLES = ("user", "assistant", "system")

# ---------------------------------------------------------------------------
# Prompt engineering
# ---------------------------------------------------------------------------
PROMPT_ENGINEERING_CAPS = {
    "specificity": 6,
    "structure": 6,
    "context": 6,
    "roleDefinition": 7,
}

SPECIFIC_MARKERS = ("specific", "exactly", "precisely", "detailed", "particular")
VAGUE_MARKERS = ("something", "stuff", "things", "help me with", "general")

CONTEXT_MARKERS = ("context:", "background:", "assume", "given that", "scenario:")
EXAMPLE_MARKERS = ("example", "e.g.", "for instance")
CONSTRAINT_MARKERS = ("constraint", "limit", "must", "should not", "requirement")

# Group 2 captures the role clause; matched case-insensitively on the raw text.
ROLE_PATTERNS = (
    r"act as (a|an) (.+?)(?:\.|,|\n|$)",
    r"you are (a|an) (.+?)(?:\.|,|\n|$)",
    r"as (a|an) (.+?)(?:\.|,|\n|$)",
)
# Matched case-sensitively against the captured role clause.
ROLE_SENIORITY_MARKERS = ("with", "experienced", "expert")

BULLET_CHARS = ("-", "•")

# ---------------------------------------------------------------------------
# Iterative refinement
# ---------------------------------------------------------------------------
ITERATIVE_REFINEMENT_CAPS = {
    "precision": 8,
    "errorCorrection": 8,
    "progressiveImprovement": 9,
}

REFINEMENT_TARGET_MARKERS = (
    "change the",
    "instead of",
    "replace",
    "modify",
    "adjust",
    "rewrite the",
    "update the",
    "revise",
)
REFINEMENT_SCOPE_MARKERS = (
    "paragraph",
    "section",
    "sentence",
    "line",
    "heading",
    "function",
    "step",
    "tone",
    "format",
    "title",
)
QUANTIFIED_TARGET_PATTERN = (
    r"\b\d+\s*(?:%|words?|sentences?|bullets?|bullet points?|items?|points?"
    r"|lines?|paragraphs?|characters?|chars?)"
)
QUOTE_MARKERS = ('"', "`", "“")

ERROR_ACKNOWLEDGMENT_MARKERS = (
    "that's wrong",
    "that is wrong",
    "incorrect",
    "mistake",
    "error",
    "not what i asked",
    "you missed",
    "you forgot",
    "doesn't work",
    "not right",
)
CORRECTION_MARKERS = (
    "should be",
    "instead",
    "correct it",
    "fix",
    "the correct",
    "it should",
    "rather than",
)
PRIOR_OUTPUT_MARKERS = (
    "you said",
    "your previous",
    "your last",
    "above",
    "earlier",
    "in your response",
    "in your answer",
)

IMPROVEMENT_MARKERS = (
    "make it more",
    "make it less",
    "more concise",
    "more detail",
    "shorter",
    "longer",
    "expand on",
    "now add",
    "also add",
    "build on",
    "improve",
    "refine",
    "take it further",
)
SUSTAINED_ITERATION_MIN_MESSAGES = 3

# ---------------------------------------------------------------------------
# Problem solving
# ---------------------------------------------------------------------------
PROBLEM_SOLVING_CAPS = {
    "decomposition": 8,
    "sequencing": 8,
    "goalOrientation": 9,
}

STEP_MARKERS = (
    "step by step",
    "first",
    "then",
    "next",
    "finally",
    "break down",
    "step 1",
    "step 2",
)
# Counted as a substring, so "understand" or "brand" also count.
MULTI_REQUEST_CONJUNCTION = "and"
MULTI_REQUEST_MIN_CONJUNCTIONS = 2
TASK_LIST_MARKERS = ("1.", "2.")
SUBTASK_MARKERS = ("subtask", "component", "part")

CONTINUITY_MARKERS = (
    "building on",
    "following from",
    "based on previous",
    "continue from",
    "as we discussed",
    "following up",
)
BASIC_MARKERS = ("basic", "simple")
ADVANCED_MARKERS = ("advanced", "complex")

TOPIC_KEYWORDS = (
    "research",
    "analysis",
    "plan",
    "strategy",
    "design",
    "develop",
    "write",
    "create",
    "build",
    "analyze",
    "calculate",
    "optimize",
)
FOCUSED_TOPIC_LIMIT = 3

OBJECTIVE_MARKERS = (
    "objective:",
    "goal:",
    "i need to",
    "i want to achieve",
    "purpose:",
    "aim:",
    "target:",
    "deliverable:",
)
ACTION_VERBS = ("create", "build", "analyze", "develop")
COMPLETION_MARKERS = (
    "thanks",
    "perfect",
    "this solves",
    "exactly what i needed",
    "completed",
    "finished",
    "that works",
    "great, that answers",
)
OFF_TOPIC_MARKERS = ("unrelated", "by the way", "another question", "completely different")
FOCUS_RATIO_THRESHOLD = 0.8

# ---------------------------------------------------------------------------
# Critical thinking
# ---------------------------------------------------------------------------
CRITICAL_THINKING_CAPS = {
    "verification": 8,
    "biasDetection": 8,
    "qualityAssessment": 9,
}

VERIFICATION_MARKERS = (
    "verify",
    "check",
    "is this correct",
    "source",
    "reference",
    "fact check",
    "evidence",
    "proof",
    "citation",
    "confirm",
    "is this accurate",
    "double check",
    "validate",
)
DOUBT_MARKERS = (
    "are you sure",
    "i think",
    "actually",
    "but what about",
    "this seems",
    "i doubt",
    "is that right",
    "correction",
)
SOURCE_REQUEST_MARKERS = ("source", "reference", "citation")

BIAS_MARKERS = (
    "bias",
    "assumption",
    "perspective",
    "point of view",
    "limitation",
    "constraint",
    "what if",
    "alternative",
    "balanced",
    "neutral",
    "objective",
    "subjective",
)
CHALLENGE_MARKERS = (
    "why",
    "how do you know",
    "what makes you think",
    "what evidence",
    "prove it",
    "justify",
    "explain why",
)
ALTERNATIVE_VIEW_MARKERS = (
    "other perspective",
    "different angle",
    "alternative view",
    "on the other hand",
    "counterargument",
    "opposing view",
)

QUALITY_MARKERS = (
    "quality",
    "better",
    "improve",
    "enhance",
    "refine",
    "more detailed",
    "more specific",
    "higher quality",
    "comprehensive",
    "thorough",
    "depth",
    "clarity",
)
IMPROVEMENT_CRITERIA_MARKERS = (
    "make it more concise",
    "add more details",
    "simplify",
    "more examples",
    "better structure",
    "clearer",
    "more professional",
    "more engaging",
    "more practical",
)
COMPARATIVE_MARKERS = (
    "this is good but",
    "could be better",
    "needs improvement",
    "not quite right",
    "almost there",
    "getting closer",
)

# ---------------------------------------------------------------------------
# Aggregation
# ---------------------------------------------------------------------------
# Highest tier first; lower bound is inclusive.
PROFICIENCY_LEVELS = (
    (86, "Expert"),
    (76, "Advanced"),
    (61, "Proficient"),
    (41, "Intermediate"),
)
DEFAULT_PROFICIENCY_LEVEL = "Novice"

FEEDBACK_THRESHOLD = 3

READING_WORDS_PER_MINUTE = 200
WRITING_WORDS_PER_MINUTE = 40

MAX_MESSAGE_CHARS = 10_000
