"""memberproxy: forwards member operations to the Member Authority and audits every attempt."""

__version__ = "0.1.0"
