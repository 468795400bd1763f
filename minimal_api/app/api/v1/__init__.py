"""
Version 1 of the API.

Routes are mounted at the application root to keep the public paths
(``/vehicles``, ``/administrators/login``...) stable.
"""
