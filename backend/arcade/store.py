"""Document store adapter.

Games, players and prizes are treated as keyed documents: the services only
ever create, fetch, list, patch and remove whole records by key, and every
write commits on its own. Models that carry a ``version`` column support
compare-and-swap writes through ``expected_version``.
"""
from contextlib import contextmanager
import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from arcade.errors import Conflict, StaleRecordError, StoreError

logger = logging.getLogger(__name__)


class DocumentStore:
    def __init__(self, db):
        self._db = db

    @property
    def session(self):
        return self._db.session

    @contextmanager
    def _guard(self, action, model):
        try:
            yield
        except IntegrityError as exc:
            self.session.rollback()
            logger.info(f"[store] {action} {model.__tablename__} rejected: {exc.orig}")
            raise Conflict(f'A {model.__tablename__} with these unique fields already exists') from exc
        except SQLAlchemyError as exc:
            self.session.rollback()
            logger.exception(f"[store] {action} {model.__tablename__} failed")
            raise StoreError() from exc

    def insert(self, model, fields):
        with self._guard('insert', model):
            record = model(**fields)
            self.session.add(record)
            self.session.commit()
        return record

    def get(self, model, key):
        with self._guard('get', model):
            return self.session.get(model, key)

    def find_one(self, model, **criteria):
        with self._guard('find', model):
            return model.query.filter_by(**criteria).first()

    def all(self, model):
        with self._guard('list', model):
            return model.query.all()

    def update(self, model, key, fields, expected_version=None, where=()):
        """Patch ``fields`` on the record ``key`` and return the fresh record.

        Returns None when no record has that key. With ``expected_version``
        the write only applies if the stored version still matches, and each
        clause in ``where`` must also hold for the stored row; otherwise
        StaleRecordError is raised and nothing is written.
        """
        versioned = hasattr(model, 'version')
        with self._guard('update', model):
            query = model.query.filter_by(id=key)
            for clause in where:
                query = query.filter(clause)
            values = dict(fields)
            if versioned:
                if expected_version is not None:
                    query = query.filter_by(version=expected_version)
                values['version'] = model.version + 1
            matched = query.update(values, synchronize_session=False)
            self.session.commit()
        if not matched:
            guarded = where or (versioned and expected_version is not None)
            if guarded and self.get(model, key) is not None:
                raise StaleRecordError()
            return None
        return self.get(model, key)

    def delete(self, model, key):
        with self._guard('delete', model):
            removed = model.query.filter_by(id=key).delete(synchronize_session=False)
            self.session.commit()
        return bool(removed)
