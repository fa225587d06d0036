"""SIP header grammar toolkit: Route / Record-Route parsing and assembly."""

__version__ = "0.1.0"
