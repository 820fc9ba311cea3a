"""
Data access for the relational store.

Repositories translate records to and from table rows.  They do not
apply business rules and let store errors propagate unchanged.
"""
