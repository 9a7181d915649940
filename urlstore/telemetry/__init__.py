from urlstore.telemetry.usage import Usage


__all__ = ['Usage']
