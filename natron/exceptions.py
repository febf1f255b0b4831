class NatronError(Exception):
    pass


class StoreError(NatronError):
    pass


class UserExistsError(StoreError):
    pass
