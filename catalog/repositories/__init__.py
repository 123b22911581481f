"""
Catalog API - Storage Layer
===========================

What:  Repositories wrapping the async SQLAlchemy session for each entity.
How:   Each call runs in its own transaction (catalog.database.session_scope)
       and returns detached ORM objects, or None when a point lookup misses.
       Storage-level signals are left as-is for the error normalizer:
         - sqlalchemy.exc.IntegrityError       (uniqueness violation)
         - MalformedIdentifierError            (id is not a UUID)
"""
