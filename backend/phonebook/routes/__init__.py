# Routes package init
"""
Phonebook Backend — API Routes Package
========================================

Route Inventory:
    - persons.py: GET    /api/persons
                  GET    /api/persons/{id}
                  DELETE /api/persons/{id}
                  POST   /api/persons
    - info.py:    GET    /info     (HTML summary)
    - health.py:  GET    /health   (service health check)

Routes stay thin: extract input, call ContactService, return the result.
"""
