"""
Roster API - Services Layer
============================

Service Inventory:
    - QueryExecutor:   acquire → execute → release, outcome values
    - StudentService:  validation and persistence for student records
    - CatalogService:  read-only food item and order listings
    - student_statements: fixed, parameterized student statements
"""
