"""
Services package — business rules on top of the repositories.

Services are plain classes constructed with the request's AsyncSession;
they never commit (the `get_db` dependency does).
"""
