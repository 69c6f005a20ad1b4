"""
Subscription Management Application Layer

- dto: untrusted request objects
- validators: coded, accumulating request validation
- mappers: request -> domain conversion
- factories: service wiring
"""
