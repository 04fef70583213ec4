"""DockerIQ shipment tracking and user management backend."""
