"""
Service layer abstraction.

Each service encapsulates business logic for a domain and talks to
storage only through its repository.  ``validation`` holds the pure
payload checks shared by the handlers, the startup bootstrap and the
``create_admin`` script.
"""
