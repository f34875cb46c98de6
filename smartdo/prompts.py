# Prompt templates for the Gemini flows.
# Placeholders are filled with str.format; field values are inserted verbatim.

CATEGORIZE_TASK_PROMPT = """You are a helpful assistant that suggests categories for tasks.

Given the following task title and description, suggest a few relevant categories.

Title: {title}
Description: {description}

Categories:"""

SCHEDULE_REMINDER_PROMPT = """You are an AI assistant that intelligently schedules reminders for tasks.

Given the following information about the task, the user's habits, and the task's urgency, determine the optimal time to send a reminder.
Consider the user's habits to suggest a time that is convenient and effective.
Take into account the urgency of the task to ensure it is completed on time.

Task Title: {task_title}
Task Description: {task_description}
Task Due Date: {task_due_date}
User Habits: {user_habits}
Task Urgency: {task_urgency}

Reason your suggestion step by step, then provide the suggested reminder date and time in ISO format and the reasoning behind it.
"""


def render_prompt(template: str, **fields: str) -> str:
    """Substitute input fields into a template. Missing fields raise KeyError."""
    return template.format(**fields)
