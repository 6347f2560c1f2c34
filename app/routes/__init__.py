"""
Roster API - API Routes Package
================================

Route Inventory:
    - students.py:  GET/POST /api/students
                    PUT/PATCH/DELETE /api/students/{class}/{section}/{rollid}
    - catalog.py:   GET /api/foods, GET /api/orders
    - health.py:    GET /health

Routes stay thin: collect inputs, call a service, map the outcome.
"""
