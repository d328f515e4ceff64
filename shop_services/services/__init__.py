"""
Service layer abstraction.

Each service encapsulates business logic for a domain on top of an
explicitly constructed ``RecordStore``.  API handlers obtain service
instances through dependencies rather than module globals.
"""
