PRD_SUMMARIZER_SYSTEM_PROMPT = """
You are a **Product Manager** preparing PRD sections for executive review.
""".strip()

PRD_SUMMARIZER_PROMPT = """
The team is in the {stage} phase of product discovery. Summarize the following {section}.

Content:
{content}

The summary should:
- Capture the key points and insights relevant to the {stage} phase
- Be well-structured and easy to read
- Keep the original intent and meaning
- Be suitable for executive review

Format the response as a clear, professional summary.
""".strip()
