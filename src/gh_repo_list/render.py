EMPTY_PLACEHOLDER = "_No repositories found._"


def format_repo_line(repo):
    parts = [f"- [{repo.name}]({repo.url})"]
    desc = (repo.description or "").strip()
    if desc:
        parts.append(f"— {desc}")

    meta = []
    if repo.stars > 0:
        meta.append(f"⭐ {repo.stars}")
    if repo.language:
        meta.append(repo.language)
    if repo.updated_at:
        meta.append(f"updated {repo.updated_at.date().isoformat()}")
    if meta:
        parts.append(f"({' • '.join(meta)})")
    return " ".join(parts)


def render_list(repos):
    lines = [format_repo_line(r) for r in repos]
    return "\n".join(lines) if lines else EMPTY_PLACEHOLDER
