from contextlib import contextmanager


@contextmanager
def unit_of_work(session):
    """Commit everything written inside the block, or roll all of it back."""
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise


class Repository:
    """Thin wrapper over a SQLAlchemy session for one model."""

    model = None

    def __init__(self, session):
        self.session = session

    def get(self, entity_id):
        return self.session.get(self.model, entity_id)

    def add(self, entity):
        self.session.add(entity)
        self.session.flush()
        return entity

    def delete(self, entity):
        self.session.delete(entity)
        self.session.flush()

    def apply_patch(self, entity, patch):
        """Set only the fields present in ``patch``."""
        for field, value in patch.items():
            setattr(entity, field, value)
        self.session.flush()
        return entity

    def count(self, *filters):
        query = self.session.query(self.model)
        if filters:
            query = query.filter(*filters)
        return query.count()
