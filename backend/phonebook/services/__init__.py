# Services package init
"""
Phonebook Backend — Services Layer
====================================

Business logic between routes (HTTP) and stores (persistence).

Service Inventory:
    - ContactService: presence/uniqueness validation, not-found handling,
                      info snapshot
"""
