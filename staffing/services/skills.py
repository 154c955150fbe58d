"""Pure helpers for skill matching and skill demand."""
from collections import Counter

EXPERIENCE_BUCKETS = ("0-2 years", "2-5 years", "5-10 years", "10+ years")


def skill_match_score(skills, keyword):
    """How many times ``keyword`` occurs in ``skills``, ignoring case.

    Computed as the length removed when every occurrence of the keyword is
    deleted, divided by the keyword length, so "JavaScript, Java" scores 2
    for "java".
    """
    if not skills or not keyword:
        return 0.0
    remaining = skills.lower().replace(keyword.lower(), "")
    return (len(skills) - len(remaining)) / len(keyword)


def tally_skills(raw_skill_lists):
    """Count comma separated skills across a sequence of free-text skill strings."""
    counts = Counter()
    for raw in raw_skill_lists:
        if not raw:
            continue
        for skill in raw.split(","):
            skill = skill.strip()
            if skill:
                counts[skill] += 1
    return counts


def top_skills(raw_skill_lists, limit=10):
    # Counter.most_common keeps first-seen order between equal counts
    return [
        {"skill": skill, "count": count}
        for skill, count in tally_skills(raw_skill_lists).most_common(limit)
    ]


def experience_bucket(years):
    # unknown experience falls through to the top bucket
    if years is None:
        return EXPERIENCE_BUCKETS[3]
    if years < 2:
        return EXPERIENCE_BUCKETS[0]
    if years < 5:
        return EXPERIENCE_BUCKETS[1]
    if years < 10:
        return EXPERIENCE_BUCKETS[2]
    return EXPERIENCE_BUCKETS[3]


def experience_histogram(values):
    """Non-empty buckets ordered by their label, so "10+ years" sorts second."""
    counts = Counter(experience_bucket(v) for v in values)
    return [
        {"experience_range": bucket, "count": count}
        for bucket, count in sorted(counts.items())
    ]
