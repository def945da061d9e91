"""
Orchestrator feature: System prompt templates, one per content type.
"""

from enum import Enum


class ContentType(str, Enum):
    LESSON = "lesson"
    TEST = "test"
    SCRIPT = "script"
    NOTES = "notes"


CONTEXT_SECTION = """Context from relevant documents:
{context}

{override}"""


def lesson_prompt(context: str, override: str = "") -> str:
    return (
        "You are an expert UPSC coach creating educational content.\n"
        "Create a comprehensive lesson on the topic below.\n"
        "Include clear explanations, examples, and key points to remember.\n"
        "Format the output with proper headings, subheadings, and bullet points.\n\n"
        + CONTEXT_SECTION.format(context=context, override=override)
    )


def exam_prompt(context: str, override: str = "") -> str:
    return (
        "You are an expert UPSC exam setter.\n"
        "Create challenging questions based on the topic below.\n"
        "For prelims, create MCQs with 4 options each and mark the correct answer.\n"
        "For mains, create descriptive questions with expected answer points.\n\n"
        + CONTEXT_SECTION.format(context=context, override=override)
    )


def script_prompt(context: str, override: str = "") -> str:
    return (
        "You are an expert UPSC coach creating a podcast or video script.\n"
        "Write a conversational script that explains the topic clearly.\n"
        "Include questions a student might ask and provide detailed answers.\n"
        "Format as a dialogue with clear speaker designations.\n\n"
        + CONTEXT_SECTION.format(context=context, override=override)
    )


def notes_prompt(context: str, override: str = "") -> str:
    return (
        "You are an expert UPSC note maker.\n"
        "Create comprehensive notes on the topic below.\n"
        "Include key facts, concepts, theories, and important points.\n"
        "Format with clear headings, bullet points, and highlight important terms.\n"
        "Include proper citations for any specific claims or facts.\n\n"
        + CONTEXT_SECTION.format(context=context, override=override)
    )


PROMPT_BUILDERS = {
    ContentType.LESSON: lesson_prompt,
    ContentType.TEST: exam_prompt,
    ContentType.SCRIPT: script_prompt,
    ContentType.NOTES: notes_prompt,
}


def build_system_prompt(content_type: ContentType, context: str, override: str | None = None) -> str:
    """Template for `content_type` with the retrieved context filled in.

    Caller-supplied text is appended after the template, never in place of it.
    """
    return PROMPT_BUILDERS[content_type](context, override or "").strip()
