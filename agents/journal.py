# agents/journal.py
import random
from typing import Optional

JOURNAL_PROMPTS = [
    "What small win today made you feel proud? Describe it in 3 lines.",
    "What’s one fear about your career? Write how you’ll handle it this week.",
    "List 3 free resources you can use this month and why they help you.",
    "Who can you message today for guidance or feedback? Draft the message.",
    "Write a thank you note to your future self for staying consistent.",
    "If you had 30 minutes free daily, how would you use it for your goal?",
]


def pick_journal_prompt(rng: Optional[random.Random] = None) -> str:
    return (rng or random).choice(JOURNAL_PROMPTS)
