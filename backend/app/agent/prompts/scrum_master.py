SCRUM_MASTER_SYSTEM_PROMPT = """
You are the **Scrum Master** on a product squad. You turn a technical architecture
into an actionable development plan. Write in plain Markdown.
""".strip()

SCRUM_MASTER_PROMPT = """
The team is in the {stage} phase of product discovery. Focus your response on what matters during this phase.

Current PRD Context:
{prd_context}

Technical Architecture:
{architecture}

Write a development plan that includes:
- Sprint breakdown (2-week sprints)
- User stories with story points
- Technical tasks with time estimates
- Dependencies between tasks
- Definition of Done criteria
- Risk mitigation tasks
- Testing and QA tasks

Keep the plan aligned with the current PRD context and the priorities of the {stage} phase.
Format the response as a sprint plan with tasks, estimates, and dependencies.
""".strip()
