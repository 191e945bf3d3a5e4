class ImageResolutionError(Exception):
    pass


class InvalidVersionError(ImageResolutionError, ValueError):
    pass


class UnsupportedVersionError(ImageResolutionError):
    pass
