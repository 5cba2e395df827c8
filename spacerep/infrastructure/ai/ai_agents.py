from pydantic import BaseModel
from pydantic_ai import Agent

from spacerep.infrastructure.ai.ai_model import get_ai_model


class FlashcardSuggestion(BaseModel):
    question: str
    answer: str


def get_flashcard_agent() -> Agent[None, list[FlashcardSuggestion]]:
    return Agent(
        get_ai_model(),
        output_type=list[FlashcardSuggestion],
        instructions="""
        Generate spaced-repetition flashcards from the provided study material.

        Every card must be:
        1. Focused: test ONE fact or idea. Split complex information into several cards
        2. Precise: the question has a single, unambiguous answer
        3. Standalone: the learner will not see the source text when reviewing,
           so never refer to "the text" or "the passage"
        4. Effortful: require recall, not recognition or trivial inference

        Guidelines:
        * Keep questions short; avoid yes/no questions
        * Prefer several small cards over one broad card
        * For processes, ask about key steps, conditions and their order
        * For concepts, ask about definitions, causes, effects and contrasts
        * Answers are concise; add a short explanation in parentheses only when it helps memory
        * Skip trivia that carries no meaning for the subject

        Write the cards in the language of the study material.
        Return a list of objects with "question" and "answer" fields.

        Generate between five and fifteen flashcards depending on how much material there is:
        """,
    )
