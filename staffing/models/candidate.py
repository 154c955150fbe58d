from staffing.extensions import db
from datetime import datetime

CANDIDATE_STATUSES = ("active", "inactive", "placed")


class Candidate(db.Model):
    __tablename__ = "candidates"

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    first_name = db.Column(db.String(100), nullable=False)
    last_name = db.Column(db.String(100), nullable=False)
    email = db.Column(db.String(255), unique=True, nullable=False)
    phone = db.Column(db.String(20))
    skills = db.Column(db.Text)
    experience_years = db.Column(db.Numeric(3, 1, asdecimal=False))
    resume_url = db.Column(db.String(500))
    status = db.Column(db.Enum(*CANDIDATE_STATUSES, name="candidate_status"), nullable=False, default="active")
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    assignments = db.relationship("Assignment", back_populates="candidate")

    def to_dict(self):
        return {
            "id": self.id,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "email": self.email,
            "phone": self.phone,
            "skills": self.skills,
            "experience_years": float(self.experience_years) if self.experience_years is not None else None,
            "resume_url": self.resume_url,
            "status": self.status,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }

    def __repr__(self):
        return f"<Candidate {self.email}>"
