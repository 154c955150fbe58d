from staffing.extensions import db
from staffing.models import Assignment, Candidate, JobOrder


def seed():
    print("🌱 Seeding assignments...")

    pairs = [
        ("alice.nguyen@example.com", "Backend Python Developer", "interviewing"),
        ("brian.okafor@example.com", "Frontend Engineer", "applied"),
        ("chen.wei@example.com", "Java Platform Engineer", "offered"),
    ]

    for email, title, status in pairs:
        candidate = Candidate.query.filter_by(email=email).first()
        job_order = JobOrder.query.filter_by(title=title).first()
        if not candidate or not job_order:
            print(f"⚠️ Missing candidate or job order for {email} -> {title}. Skipping.")
            continue

        existing = Assignment.query.filter_by(candidate_id=candidate.id, job_order_id=job_order.id).first()
        if existing:
            print(f"⚠️ {email} already assigned to '{title}'. Skipping insert.")
            continue

        db.session.add(Assignment(candidate_id=candidate.id, job_order_id=job_order.id, status=status))

    db.session.commit()
    print("✅ Assignments seeded successfully!")
