"""Core — pure query construction, ordering, pagination and error types.

Invariants:
    - No IO here: nothing in core touches the database or the network
    - Core never imports from infrastructure, services or api
"""
