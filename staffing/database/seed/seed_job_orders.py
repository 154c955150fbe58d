import decimal

from staffing.extensions import db
from staffing.models import Client, JobOrder


def seed():
    print("🌱 Seeding job orders...")

    northwind = Client.query.filter_by(company_name="Northwind Logistics").first()
    contoso = Client.query.filter_by(company_name="Contoso Health").first()
    if not northwind or not contoso:
        print("⚠️ Seed clients missing. Run the client seeder first.")
        return

    job_orders = [
        JobOrder(
            client_id=northwind.id,
            title="Backend Python Developer",
            description="Build and maintain the shipment tracking APIs.",
            required_skills="Python, Django, PostgreSQL",
            experience_required=decimal.Decimal("3.0"),
            salary_range="$90k - $110k",
            location="Seattle, WA",
        ),
        JobOrder(
            client_id=northwind.id,
            title="Frontend Engineer",
            description="Own the customer portal built with React.",
            required_skills="JavaScript, React, CSS",
            experience_required=decimal.Decimal("2.0"),
            salary_range="$80k - $100k",
            location="Remote",
        ),
        JobOrder(
            client_id=contoso.id,
            title="Java Platform Engineer",
            description="Modernise the claims processing platform.",
            required_skills="Java, Spring Boot, Kubernetes, Python",
            experience_required=decimal.Decimal("5.0"),
            salary_range="$120k - $140k",
            location="Denver, CO",
        ),
    ]

    for job_order in job_orders:
        existing = JobOrder.query.filter_by(title=job_order.title, client_id=job_order.client_id).first()
        if existing:
            print(f"⚠️ Job order '{job_order.title}' already exists. Skipping insert.")
            continue
        db.session.add(job_order)

    db.session.commit()
    print("✅ Job orders seeded successfully!")
