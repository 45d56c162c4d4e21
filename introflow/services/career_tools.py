"""Career Tools — prompts for the AI-written resume, cover letter and profile copy.

Invariants:
    - Prompts are built only from the user's own profile, preferences and the
      optional job description in the request
    - The generated text is returned as-is; nothing is persisted

Design Decisions:
    - Prompt building is pure (build_prompts) so it is tested without the SDK
"""

from introflow.core.domain_types import CareerTool
from introflow.core.repository_protocols import ContentGenerator
from introflow.models import JobPreferences, User

_SYSTEM_PROMPTS: dict[CareerTool, str] = {
    CareerTool.RESUME: (
        "You are an experienced technical recruiter. Write a concise, "
        "achievement-oriented resume in Markdown for the candidate described "
        "by the user. Use clear section headings and bullet points. Do not "
        "invent employers, degrees or dates."
    ),
    CareerTool.COVER_LETTER: (
        "You write warm, specific cover letters. Keep it under 350 words, "
        "address the hiring team, tie the candidate's background to the role, "
        "and end with a clear call to action."
    ),
    CareerTool.LINKEDIN_PROFILE: (
        "You optimize professional networking profiles. Produce a headline "
        "(max 220 characters) and an About section (max 2000 characters) in "
        "first person, followed by five suggested skills."
    ),
}


def build_prompts(
    tool: CareerTool,
    user: User,
    preferences: JobPreferences | None,
    job_description: str | None = None,
) -> tuple[str, str]:
    """Return (system_prompt, user_prompt) for one career tool."""
    lines = [
        f"Name: {user.name or user.username}",
        f"Current title: {user.job_title or 'Not provided'}",
    ]
    if user.linkedin_profile_url:
        lines.append(f"Profile: {user.linkedin_profile_url}")
    if preferences is not None:
        if preferences.titles:
            lines.append("Target roles: " + ", ".join(preferences.titles))
        if preferences.locations:
            lines.append("Preferred locations: " + ", ".join(preferences.locations))
        if preferences.industries:
            lines.append("Industries: " + ", ".join(preferences.industries))
    if job_description and job_description.strip():
        lines.append("")
        lines.append("Job description:")
        lines.append(job_description.strip())
    return _SYSTEM_PROMPTS[tool], "\n".join(lines)


async def run_career_tool(
    generator: ContentGenerator,
    tool: CareerTool,
    user: User,
    preferences: JobPreferences | None,
    job_description: str | None = None,
) -> str:
    system_prompt, user_prompt = build_prompts(tool, user, preferences, job_description)
    return await generator.generate(tool, system_prompt, user_prompt)
