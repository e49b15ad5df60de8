"""
Service layer abstraction.

Services hold the data-access logic for a domain so that API handlers
only translate between HTTP and service calls.  Services receive the
collection handle as an argument, which lets tests pass in a fake.
"""
