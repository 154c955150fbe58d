from staffing.extensions import db
from datetime import datetime

ASSIGNMENT_STATUSES = ("applied", "interviewing", "offered", "placed", "rejected")


class Assignment(db.Model):
    __tablename__ = "assignments"
    __table_args__ = (
        db.UniqueConstraint("candidate_id", "job_order_id", name="uq_assignment_candidate_job_order"),
    )

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    candidate_id = db.Column(db.Integer, db.ForeignKey("candidates.id"), nullable=False)
    job_order_id = db.Column(db.Integer, db.ForeignKey("job_orders.id"), nullable=False)
    status = db.Column(db.Enum(*ASSIGNMENT_STATUSES, name="assignment_status"), nullable=False, default="applied")
    notes = db.Column(db.Text)
    start_date = db.Column(db.DateTime)
    end_date = db.Column(db.DateTime)
    assigned_date = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    candidate = db.relationship("Candidate", back_populates="assignments")
    job_order = db.relationship("JobOrder", back_populates="assignments")

    def to_dict(self):
        return {
            "id": self.id,
            "candidate_id": self.candidate_id,
            "job_order_id": self.job_order_id,
            "status": self.status,
            "notes": self.notes,
            "start_date": self.start_date.isoformat() if self.start_date else None,
            "end_date": self.end_date.isoformat() if self.end_date else None,
            "assigned_date": self.assigned_date.isoformat() if self.assigned_date else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }

    def __repr__(self):
        return f"<Assignment candidate={self.candidate_id} job_order={self.job_order_id}>"
