class OpenSpaceAdminError(Exception):
    """Base exception for all openspace_admin errors"""
    pass

class ConfigError(OpenSpaceAdminError):
    """Invalid or inconsistent global.json"""
    pass

class RecordSchemaError(OpenSpaceAdminError):
    """
    Raw record data doesn't match what the entity profile expects
    missing fields, unknown status values, duplicate ids, etc
    """
    pass

class RecordLoadError(OpenSpaceAdminError):
    """A record source could not produce a collection"""
    pass

class UnknownCategoryError(OpenSpaceAdminError):
    """Category selector is not one of the profile's declared categories"""
    pass

class UnsupportedMutationError(OpenSpaceAdminError):
    """Mutation requested on an entity type that has no mutable flag"""
    pass
