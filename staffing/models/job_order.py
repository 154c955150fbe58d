from staffing.extensions import db
from datetime import datetime

JOB_ORDER_STATUSES = ("open", "closed", "filled")


class JobOrder(db.Model):
    __tablename__ = "job_orders"

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    title = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text)
    required_skills = db.Column(db.Text)
    experience_required = db.Column(db.Numeric(3, 1, asdecimal=False))
    client_id = db.Column(db.Integer, db.ForeignKey("clients.id"), nullable=False)
    salary_range = db.Column(db.String(100))
    location = db.Column(db.String(255))
    status = db.Column(db.Enum(*JOB_ORDER_STATUSES, name="job_order_status"), nullable=False, default="open")
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    client = db.relationship("Client", back_populates="job_orders")
    assignments = db.relationship("Assignment", back_populates="job_order")

    def to_dict(self):
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "required_skills": self.required_skills,
            "experience_required": float(self.experience_required) if self.experience_required is not None else None,
            "client_id": self.client_id,
            "salary_range": self.salary_range,
            "location": self.location,
            "status": self.status,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }

    def __repr__(self):
        return f"<JobOrder {self.title}>"
