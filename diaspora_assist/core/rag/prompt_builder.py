"""
RAG answer prompt.

Defines the instruction template for grounded, cited answers and the
citation convention shared with the evaluator. Answers must cite sources
as "(Source: <identifier>)".

Dependencies: langchain_core.prompts
System role: Prompt template for answer generation
"""

import re

from langchain_core.prompts import PromptTemplate

from diaspora_assist.models.chat import ConversationTurn
from diaspora_assist.models.rag import RetrievedContext

CITATION_PATTERN = re.compile(r"\(Source:\s*[\w_.-]+\)", re.IGNORECASE)

RAG_ANSWER_TEMPLATE = """You are an AI assistant specialized in providing accurate information
about immigration and diaspora services. Answer the user question ONLY using
the context provided below. Do NOT make up information.

If the context doesn't contain enough information to provide a complete answer,
instead of saying "I do not have enough information", ask 2-3 specific follow-up
questions that would help you provide a better answer. For example:
- What is your current nationality?
- What type of visa are you applying for?
- What is your current immigration status?
- Do you have a job offer?
- What is your educational background?
- How long do you plan to stay?

CONTEXT:
{context}
{conversation_history}
CURRENT USER QUESTION:
{question}

INSTRUCTIONS:
- Respond in clear, natural {language}
- Consider the conversation history when answering
- If you can answer with the available context, cite source files explicitly, e.g., {citation_example}
- If context is insufficient, ask 2-3 relevant follow-up questions to gather more details
- Keep responses concise, factual, and helpful
- Avoid hallucinations or assumptions
- Be helpful and guide the user to provide the information needed for a complete answer
- Use information from previous conversation turns to provide more personalized answers
"""

RAG_ANSWER_PROMPT = PromptTemplate.from_template(RAG_ANSWER_TEMPLATE)


def format_citation(source: str) -> str:
    """Render a source identifier in the citation format answers must use."""
    return f"(Source: {source})"


def format_conversation(conversation: list[ConversationTurn] | None) -> str:
    """
    Render prior turns oldest first.

    Args:
        conversation: Prior turns in chronological order

    Returns:
        str: History block, or "" when there are no turns
    """
    if not conversation:
        return ""

    lines = ["", "CONVERSATION HISTORY:"]
    for number, turn in enumerate(conversation, start=1):
        lines.append(f"{number}. User: {turn.question}")
        lines.append(f"   Assistant: {turn.answer}")
        lines.append("")
    return "\n".join(lines)


def build_prompt(
    query: str,
    context: RetrievedContext,
    language: str = "English",
    conversation: list[ConversationTurn] | None = None,
) -> str:
    """
    Build the answer prompt for a question and its retrieved context.

    Args:
        query: Current user question
        context: Retrieved context bundle
        language: Language name the answer should be written in
        conversation: Optional prior turns in chronological order

    Returns:
        str: Full prompt text
    """
    return RAG_ANSWER_PROMPT.format(
        context=context.context_text,
        conversation_history=format_conversation(conversation),
        question=query,
        language=language,
        citation_example=format_citation("uk_visa_faq.txt"),
    )
