PERSONALITY_QUESTIONS: tuple[str, ...] = (
    "What's your brand's primary tone of voice?",
    "How formal should your communications be?",
    "What emotions should your brand evoke in customers?",
    "How do you want customers to perceive your brand?",
    "What's your brand's personality archetype?",
    "How should your brand handle conflict or criticism?",
    "What's your preferred communication style?",
    "How does your brand demonstrate authority and expertise?",
    "What makes your brand unique in your industry?",
)

QUESTIONS_COUNT = len(PERSONALITY_QUESTIONS)
ADJECTIVES_COUNT = 3


def get_question_by_index(index: int) -> str | None:
    if index < 0 or index >= QUESTIONS_COUNT:
        return None
    return PERSONALITY_QUESTIONS[index]
