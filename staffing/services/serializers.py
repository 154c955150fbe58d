# Response shapes for joined rows


def job_order_view(job_order, client, with_contact=False):
    data = job_order.to_dict()
    data["company_name"] = client.company_name
    data["contact_person"] = client.contact_person
    if with_contact:
        data["client_email"] = client.email
        data["client_phone"] = client.phone
    return data


def job_order_summary(job_order):
    return {
        "id": job_order.id,
        "title": job_order.title,
        "status": job_order.status,
        "experience_required": job_order.to_dict()["experience_required"],
        "required_skills": job_order.required_skills,
        "salary_range": job_order.salary_range,
        "location": job_order.location,
        "created_at": job_order.created_at.isoformat() if job_order.created_at else None,
    }


def assignment_view(assignment, candidate, job_order, client):
    data = assignment.to_dict()
    data.update({
        "candidate_first_name": candidate.first_name,
        "candidate_last_name": candidate.last_name,
        "candidate_email": candidate.email,
        "candidate_skills": candidate.skills,
        "candidate_experience": candidate.to_dict()["experience_years"],
        "job_title": job_order.title,
        "job_required_skills": job_order.required_skills,
        "client_company": client.company_name,
    })
    return data


def assignment_views(rows):
    return [assignment_view(*row) for row in rows]
