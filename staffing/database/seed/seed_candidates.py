import decimal

from staffing.extensions import db
from staffing.models import Candidate


def seed():
    print("🌱 Seeding candidates...")

    candidates = [
        Candidate(
            first_name="Alice",
            last_name="Nguyen",
            email="alice.nguyen@example.com",
            phone="+1 555 123 4567",
            skills="Python, Django, PostgreSQL, Docker",
            experience_years=decimal.Decimal("6.5"),
            resume_url="https://resumes.example.com/alice-nguyen.pdf",
        ),
        Candidate(
            first_name="Brian",
            last_name="Okafor",
            email="brian.okafor@example.com",
            phone="+1 555 987 6543",
            skills="JavaScript, React, Node.js, Java",
            experience_years=decimal.Decimal("3.0"),
        ),
        Candidate(
            first_name="Chen",
            last_name="Wei",
            email="chen.wei@example.com",
            skills="Java, Spring Boot, Kubernetes",
            experience_years=decimal.Decimal("11.0"),
        ),
        Candidate(
            first_name="Dana",
            last_name="Smith",
            email="dana.smith@example.com",
            skills="Excel, SQL, Tableau",
            experience_years=decimal.Decimal("1.5"),
            status="inactive",
        ),
    ]

    for candidate in candidates:
        existing = Candidate.query.filter_by(email=candidate.email).first()
        if existing:
            print(f"⚠️ Candidate '{candidate.email}' already exists. Skipping insert.")
            continue
        db.session.add(candidate)

    db.session.commit()
    print("✅ Candidates seeded successfully!")
