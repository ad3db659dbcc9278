# Routes package init
"""
Users API Backend - API Routes Package
=======================================

Route Inventory:
    - health.py:  GET    /api/v1/health
    - users.py:   GET    /api/v1/users
                  GET    /api/v1/users/{id}
                  POST   /api/v1/users
                  DELETE /api/v1/users/{id}

Routes stay THIN: pull the service from a dependency, call it, wrap the
result in an envelope. Lookups and validation rules live in services.
"""
