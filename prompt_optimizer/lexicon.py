"""
Lookup tables used by the analysis and optimization engine.

Every keyword list, phrase list, scoring weight, and per-intent sentence
lives here so the heuristics can be tested and swapped independently of
the code that applies them.
"""

import re

# ── Feature extraction ─────────────────────────────────────────

VAGUE_WORDS = frozenset(
    {"something", "stuff", "things", "good", "bad", "nice", "great", "awesome", "terrible"}
)

PRONOUNS = frozenset({"it", "this", "that", "these", "those"})

QUANTIFIER_PHRASES = ("how many", "what percentage", "exactly", "precisely", "specifically")

VAGUE_ADJECTIVES = frozenset({"some", "many", "few", "several", "various", "multiple"})

PRECISE_DESCRIPTORS = frozenset({"detailed", "comprehensive", "thorough", "specific", "exact"})

FLOW_CONNECTIVES = frozenset(
    {"first", "then", "next", "finally", "therefore", "however", "additionally"}
)

SENTENCE_SPLIT_RE = re.compile(r"[.!?]+")
NUMBER_RE = re.compile(r"\d+(?:\.\d+)?")
LIST_MARKER_RE = re.compile(r"^\s*(?:[-*•]|\d+[.)])\s+", re.MULTILINE)
SECTION_BREAK_RE = re.compile(r"\n[ \t]*\n")

# Checked in this order; each category that matches counts once.
TECHNICAL_PATTERNS = (
    ("all_caps", re.compile(r"\b[A-Z]{2,}\b")),
    # Abbreviations such as "e.g." and "i.e." do not count
    ("dotted_identifier", re.compile(r"\b(?:[A-Za-z_]\w+\.[A-Za-z_]\w*|[A-Za-z_]\w*\.[A-Za-z_]\w+)\b")),
    ("underscore_identifier", re.compile(r"\b[A-Za-z0-9]+_\w+\b")),
)

# Punctuation stripped from whitespace tokens before word matching
TOKEN_STRIP_CHARS = ".,!?;:\"'()[]{}<>`*_-"

# ── Prompt elements ────────────────────────────────────────────

CONTEXT = "context"
ROLE = "role"
FORMAT = "format"
EXAMPLES = "examples"
CONSTRAINTS = "constraints"
OUTPUT_SPECIFICATION = "output_specification"

ELEMENT_ORDER = (CONTEXT, ROLE, FORMAT, EXAMPLES, CONSTRAINTS, OUTPUT_SPECIFICATION)

ELEMENT_PHRASES = {
    CONTEXT: ("background", "context", "situation", "scenario", "given that", "assuming"),
    ROLE: ("act as", "you are a", "pretend to be", "imagine you're", "as a", "role of"),
    FORMAT: ("format", "structure", "organize", "list", "table", "bullet points", "numbered"),
    EXAMPLES: ("such as", "like", "for example", "e.g.", "including", "examples", "example"),
    CONSTRAINTS: ("must", "should", "required", "limit", "maximum", "minimum", "within"),
    OUTPUT_SPECIFICATION: ("provide", "generate", "create", "write", "produce", "return"),
}

# Intents for which an absent element is worth reporting as missing.
# Elements not listed here are always evaluated.
ELEMENT_INTENT_GATES = {
    ROLE: frozenset({"creative", "analysis", "code"}),
    EXAMPLES: frozenset({"creative", "marketing"}),
}

# ── Intents ────────────────────────────────────────────────────

GENERAL_INTENT = "general"

INTENT_OPTIONS = (
    ("general", "General Purpose"),
    ("analysis", "Analyze Data"),
    ("creative", "Creative Writing"),
    ("summary", "Summarization"),
    ("qa", "Q&A"),
    ("code", "Code Generation"),
    ("content", "Content Creation"),
    ("marketing", "Marketing Copy"),
    ("research", "Research"),
)

# ── Category classification ────────────────────────────────────

GENERAL_CATEGORY = "general"
GENERAL_BASE_SCORE = 1
CATEGORY_KEYWORD_WEIGHT = 3

# Iteration order decides ties.
CATEGORY_KEYWORDS = (
    ("code-generation", ("code", "function", "program", "script", "algorithm", "debug",
                         "python", "javascript", "api", "implement", "refactor")),
    ("data-analysis", ("analyze", "analysis", "data", "statistic", "trend", "chart",
                       "dataset", "metric", "insight", "correlation")),
    ("creative-writing", ("story", "poem", "creative", "character", "narrative", "fiction",
                          "plot", "novel")),
    ("summarization", ("summarize", "summary", "key points", "tl;dr", "condense",
                       "overview", "recap")),
    ("research", ("research", "study", "sources", "evidence", "literature", "investigate",
                  "compare")),
    ("marketing", ("marketing", "campaign", "brand", "audience", "slogan", "advertis",
                   "product launch", "seo", "conversion")),
)

BASE_CONFIDENCE = 70
CONFIDENCE_PER_KEYWORD = 5
MAX_CONFIDENCE = 100

# ── Scoring weights ────────────────────────────────────────────

SCORE_MIN = 1
SCORE_MAX = 10

CLARITY_START = 10
CLARITY_VAGUE_WORD_PENALTY = 1.5
CLARITY_LONG_SENTENCE_WORDS = 25
CLARITY_LONG_SENTENCE_PENALTY = 1
CLARITY_SHORT_SENTENCE_WORDS = 5
CLARITY_SHORT_SENTENCE_PENALTY = 2
CLARITY_PRONOUN_RATIO = 0.05
CLARITY_PRONOUN_PENALTY = 1

SPECIFICITY_START = 5
SPECIFICITY_NUMBER_BONUS = 2
SPECIFICITY_QUANTIFIER_BONUS = 1
SPECIFICITY_TECHNICAL_BONUS = 0.5
SPECIFICITY_VAGUE_ADJECTIVE_PENALTY = 0.5
SPECIFICITY_DESCRIPTOR_BONUS = 1

STRUCTURE_START = 3
STRUCTURE_LIST_BONUS = 2
STRUCTURE_SECTION_BONUS = 1
STRUCTURE_MAX_CONNECTIVES = 3
STRUCTURE_ROLE_BONUS = 2
STRUCTURE_FORMAT_BONUS = 2

CHARS_PER_TOKEN = 4

MAX_WEAKNESSES = 3
MAX_IMPROVEMENT_CANDIDATES = 5
WEAKNESS_THRESHOLD = 6

# ── Optimization tiers ─────────────────────────────────────────

MINIMAL_TIER_MIN_SCORE = 7
TARGETED_TIER_MIN_SCORE = 5
ALREADY_STRONG_SCORE = 8

TARGETED_SCORE_DELTA = 2
FULL_SCORE_DELTA_PER_CHANGE = 0.8
MINIMAL_SCORE_DELTA = 1

# ── Synthesis text banks ───────────────────────────────────────

CONTEXT_BANK = {
    "creative": "Context: You are working on a creative project that should feel original "
                "and engage its readers from the first line.",
    "analysis": "Context: You are examining information to uncover meaningful patterns "
                "and insights that support decisions.",
    "code": "Context: You are building software that will be read, maintained, and run "
            "in production.",
    "marketing": "Context: You are preparing marketing material for a defined audience "
                 "with a clear business goal.",
    "research": "Context: You are researching a topic where accuracy and sourcing matter "
                "more than speed.",
}

ROLE_BANK = {
    "creative": "Act as an accomplished creative writer with a distinctive voice.",
    "analysis": "Act as a senior data analyst experienced in statistical reasoning.",
    "code": "Act as a senior software engineer who writes clean, tested code.",
    "marketing": "Act as an experienced marketing strategist.",
    "research": "Act as a meticulous research specialist.",
}

FORMAT_BANK = {
    "creative": "Format: Give the piece a clear beginning, middle, and end, with a title.",
    "analysis": "Format: Start with a short summary, then list key findings as bullet points "
                "followed by recommendations.",
    "code": "Format: Return the code in a single code block followed by a brief explanation "
            "and a usage example.",
    "marketing": "Format: Structure the copy with a headline, supporting points, and a call "
                 "to action.",
    "research": "Format: Organize the response into headed sections and cite sources where "
                "possible.",
}
GENERIC_FORMAT = "Format: Structure your response clearly, using headings or bullet points " \
                 "where they help."

OUTPUT_BANK = {
    "creative": "Output: Deliver the finished piece, ready to share without further editing.",
    "analysis": "Output: Deliver actionable conclusions backed by the data.",
    "code": "Output: Deliver working code that handles edge cases and includes comments.",
    "marketing": "Output: Deliver copy that is ready to publish.",
    "research": "Output: Deliver a well-supported answer that notes any open questions.",
}
GENERIC_OUTPUT = "Output: Deliver a complete response that fully addresses the request."

EXAMPLES_SENTENCE = "Include specific examples to illustrate your points."
CONSTRAINTS_TEMPLATE = "Constraints: Keep the tone {tone} and stay focused on the request."

MINIMAL_EXAMPLES_SENTENCE = "Include at least one concrete example."
MINIMAL_OUTPUT_SENTENCE = "Provide a clear and complete response."

# Upper bounds (exclusive) for each tone wording; anything above is technical.
TONE_WORDINGS = (
    (33, "casual and friendly"),
    (66, "professional and clear"),
)
TECHNICAL_TONE = "technical and precise"

# ── Improvement descriptions ───────────────────────────────────

NOTE_ALREADY_STRONG = "Prompt is already well-structured; no changes needed."
NOTE_MINOR_ENHANCEMENTS = "Applied minor enhancements only; the prompt covers the critical elements."
NOTE_NOTHING_TARGETED = "No targeted changes needed; role, format, and examples are covered."

IMPROVEMENT_DESCRIPTIONS = {
    CONTEXT: "Added background context for the {intent} task",
    ROLE: "Assigned an expert role to guide the response",
    FORMAT: "Specified how the response should be structured",
    EXAMPLES: "Requested concrete examples",
    CONSTRAINTS: "Added constraints with a {tone} tone",
    OUTPUT_SPECIFICATION: "Clarified the expected output",
}

IMPROVEMENT_CANDIDATES = {
    CONTEXT: "Add background context or the situation behind the request",
    ROLE: "Assign a role, e.g. \"Act as a senior analyst\"",
    FORMAT: "Specify the response format (list, table, sections)",
    EXAMPLES: "Include or ask for examples",
    CONSTRAINTS: "State constraints such as length, scope, or must-haves",
    OUTPUT_SPECIFICATION: "Say exactly what output you expect",
}

WEAKNESS_DESCRIPTIONS = {
    "empty": "Prompt is empty",
    "vague_language": "Uses vague words that can be read many ways",
    "low_clarity": "Sentences are hard to follow",
    "low_specificity": "Lacks specific details or measurable criteria",
    "low_structure": "Lacks clear structure or organization",
}

# ── Templates ──────────────────────────────────────────────────

PROMPT_TEMPLATES = (
    {
        "id": "analysis",
        "name": "Data Analysis",
        "description": "Analyze data and provide insights",
        "template": "Analyze the following data and provide key insights, trends, and "
                    "actionable recommendations: [INSERT DATA]",
        "category": "Analysis",
        "intent": "analysis",
    },
    {
        "id": "blog",
        "name": "Blog Post",
        "description": "Create engaging blog content",
        "template": "Write a comprehensive and engaging blog post about [TOPIC]. Include an "
                    "attention-grabbing introduction, 3-4 main sections with practical "
                    "insights, and a compelling conclusion that encourages action.",
        "category": "Content",
        "intent": "content",
    },
    {
        "id": "summary",
        "name": "Text Summary",
        "description": "Summarize long content",
        "template": "Provide a concise summary of the following text, highlighting the main "
                    "points and key takeaways: [INSERT TEXT]",
        "category": "Summary",
        "intent": "summary",
    },
    {
        "id": "code",
        "name": "Code Generation",
        "description": "Generate clean, documented code",
        "template": "Generate clean, well-documented code for [FUNCTIONALITY]. Include "
                    "comments explaining the logic and provide usage examples.",
        "category": "Code",
        "intent": "code",
    },
    {
        "id": "creative",
        "name": "Creative Writing",
        "description": "Creative content generation",
        "template": "Create a creative and engaging piece about [TOPIC]. Use vivid "
                    "descriptions, compelling characters (if applicable), and maintain a "
                    "[TONE] throughout.",
        "category": "Creative",
        "intent": "creative",
    },
    {
        "id": "qa",
        "name": "Q&A Format",
        "description": "Question and answer format",
        "template": "Provide detailed answers to the following questions about [TOPIC]. "
                    "Structure each answer clearly and include practical examples where "
                    "relevant: [INSERT QUESTIONS]",
        "category": "Q&A",
        "intent": "qa",
    },
)
