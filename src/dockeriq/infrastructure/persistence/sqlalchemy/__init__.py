"""SQLAlchemy (async) persistence of users and shipments."""
