"""Message Templates — strength-rated introduction requests, pure text rendering.

Invariants:
    - strength_tier is total: every integer maps to exactly one TemplateTier
    - >= 4 strong, >= 3 medium, everything else (including 0 = unrated) weak
    - select_template output never contains an unfilled placeholder

Design Decisions:
    - str.format over a templating engine: three fixed texts, no logic inside them
    - Blank context values are replaced by neutral phrases before rendering,
      so a user without a calendar link still gets a readable message
"""

from dataclasses import dataclass, fields

from introflow.core.domain_types import TemplateTier


@dataclass(frozen=True)
class TemplateContext:
    """Values interpolated into every template."""
    friend_name: str
    job_title: str
    target_company: str
    employee_name: str
    user_name: str
    user_linkedin_url: str = ""
    calendar_url: str = ""


_FALLBACKS = {
    "friend_name": "there",
    "job_title": "open",
    "target_company": "your company",
    "employee_name": "your colleague",
    "user_name": "me",
    "user_linkedin_url": "LinkedIn profile available on request",
    "calendar_url": "by replying to this message",
}


_STRONG = """Hey {friend_name},

Hope you're doing well! Quick ask: I'm applying for a {job_title} role at {target_company} and noticed you're connected to {employee_name} there.

If you know them well enough, would you mind forwarding a quick note on my behalf? Here's something you could easily pass along if it's helpful:

---
Hi {employee_name},

Hope you're doing well! A friend of mine, {user_name} ({user_linkedin_url}), is exploring opportunities and mentioned they're excited about the {job_title} role at {target_company}. Based on what I know about them, they'd be a great fit. Just wanted to put them on your radar! Would you be open to connecting? If so, let me know or use their calendar link {calendar_url}.
---

No pressure at all, just figured I'd ask. Thanks a ton either way!

{user_name}"""


_MEDIUM = """Hi {friend_name},

I hope this message finds you well! I noticed we're both connected with {employee_name} from {target_company}, and I wanted to reach out for a small favor.

I'm currently applying for the {job_title} position at {target_company} and I'm really excited about the opportunity. Would you possibly feel comfortable introducing me to {employee_name}? I'd really appreciate a brief introduction if you think it wouldn't be imposing.

I've drafted a short message below that you could use or modify:

---
Hi {employee_name},

I wanted to connect you with {user_name} ({user_linkedin_url}) who I know professionally. They're interested in the {job_title} role at {target_company} and I thought you two should connect. They would appreciate a conversation if you have time; they're available at {calendar_url}.
---

I completely understand if you're not comfortable with this request. Either way, thanks for considering it!

Best regards,
{user_name}"""


_WEAK = """Hello {friend_name},

I hope you don't mind me reaching out. I see that we're both connected to {employee_name} at {target_company}.

I'm currently exploring new opportunities and am particularly interested in the {job_title} position at {target_company}. I was wondering if you might know {employee_name} well enough to facilitate an introduction?

If you're comfortable doing so, here's a brief message you could use:

---
Hello {employee_name},

I'd like to introduce you to {user_name} ({user_linkedin_url}), who I'm connected with on LinkedIn. They're interested in the {job_title} position at {target_company} and would appreciate a brief conversation to learn more. They can be reached through their calendar link: {calendar_url}
---

I fully understand if you're not in a position to make this introduction, and I know it's an imposition to ask. Thank you for considering my request.

Regards,
{user_name}"""


TEMPLATES: dict[TemplateTier, str] = {
    TemplateTier.STRONG: _STRONG,
    TemplateTier.MEDIUM: _MEDIUM,
    TemplateTier.WEAK: _WEAK,
}


def strength_tier(strength: int) -> TemplateTier:
    """Band a strength rating. Total over all integers."""
    if strength >= 4:
        return TemplateTier.STRONG
    if strength >= 3:
        return TemplateTier.MEDIUM
    return TemplateTier.WEAK


def render_template(tier: TemplateTier, context: TemplateContext) -> str:
    """Render one tier with blank values replaced by their fallbacks."""
    values = {}
    for f in fields(context):
        raw = getattr(context, f.name)
        value = raw.strip() if isinstance(raw, str) else ""
        values[f.name] = value or _FALLBACKS[f.name]
    return TEMPLATES[tier].format(**values)


def select_template(strength: int, context: TemplateContext) -> str:
    """Pick the template band for `strength` and render it."""
    return render_template(strength_tier(strength), context)
