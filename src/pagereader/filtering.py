from __future__ import annotations


def filter_by_objective(content: str, objective: str) -> str:
    """Keep only the lines that mention at least one objective keyword.

    Matching is a case-insensitive substring test per line. When nothing
    matches, the original content is returned so a narrow objective never
    produces an empty answer.
    """
    keywords = objective.lower().split()
    if not keywords:
        return content

    relevant = [
        line for line in content.split("\n") if any(kw in line.lower() for kw in keywords)
    ]
    return "\n".join(relevant) if relevant else content
