"""Errors raised by family network mutations."""


class FamilyNetworkError(Exception):
    """Base class for family network errors."""


class NetworkNotFound(FamilyNetworkError):
    """No family network with the given id."""

    def __init__(self, network_id: str):
        self.network_id = network_id
        super().__init__(f"Family network not found: {network_id}")


class MemberNotFound(FamilyNetworkError):
    """No member with the given id in the network."""

    def __init__(self, member_id: str):
        self.member_id = member_id
        super().__init__(f"Family member not found: {member_id}")
