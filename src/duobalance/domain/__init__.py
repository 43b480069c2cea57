"""Domain layer for duobalance application.

Services are imported from their modules (e.g. ``duobalance.domain.expense``)
so that the database layer can depend on ``duobalance.domain.entities``
without importing the services back.
"""
