from staffing.extensions import db
from staffing.models import Client


def seed():
    print("🌱 Seeding clients...")

    clients = [
        Client(
            company_name="Northwind Logistics",
            contact_person="Maria Anders",
            email="maria.anders@northwind.example",
            phone="+1 (555) 010-2000",
            address="12 Harbor Road, Seattle, WA",
        ),
        Client(
            company_name="Contoso Health",
            contact_person="Daniel Park",
            email="hiring@contoso.example",
            phone="+1 (555) 010-3000",
            address="400 Market Street, Denver, CO",
        ),
        Client(
            company_name="Fabrikam Retail",
            contact_person="Priya Natarajan",
            email="talent@fabrikam.example",
            phone="+1 (555) 010-4000",
            address="77 Commerce Blvd, Austin, TX",
            status="inactive",
        ),
    ]

    for client in clients:
        existing = Client.query.filter_by(company_name=client.company_name).first()
        if existing:
            print(f"⚠️ Client '{client.company_name}' already exists. Skipping insert.")
            continue
        db.session.add(client)

    db.session.commit()
    print("✅ Clients seeded successfully!")
