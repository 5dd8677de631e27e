# messenger/core/__init__.py
"""
Core application modules.
Contains essential infrastructure components:
- errors: Domain error taxonomy rendered as {"error": message} responses
- security: Password hashing and access token issuance/verification
- state: Per-application container wiring the in-memory stores together
- timeutil: UTC timestamps in the wire format used by the web client
"""
