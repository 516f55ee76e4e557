"""
Service layer.

Services own the application state and the operations on it.  Route
handlers only translate between HTTP and service calls.
"""
