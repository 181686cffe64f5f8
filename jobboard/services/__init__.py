# Services package init
"""
Job Board — Services Layer
===========================

What:  Business logic between routes (HTTP) and the ORM (persistence).
How:   Stateless service singletons receive an AsyncSession per call, apply
       the resource rules, and return Pydantic response models.

Service Inventory:
    - BaseService: pagination, lookup-or-404 and database error translation
    - UserService: users CRUD, password hashing, unique email
    - JobService: job postings CRUD, employer role check
    - ApplicationService: applications CRUD, job seeker / job checks
"""
