"""
Catalog API - Services Layer
============================

Service Inventory:
    - validation.py:       pure business-rule checks for product fields
    - error_normalizer.py: storage failure → catalog error taxonomy
    - product_service.py:  list / get / search / create / update / delete
"""
