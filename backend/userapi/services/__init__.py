# Services package init
"""
Users API Backend - Services Layer
===================================

What:  Business logic sitting between routes (HTTP) and the user store.

Service Inventory:
    - UserService: list/get/create/delete over a UserStore

Services can be unit-tested against a plain UserStore with no HTTP involved.
"""
