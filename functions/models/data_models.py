from dataclasses import asdict, dataclass


@dataclass
class SetAdminRoleResponse:
    message: str

    def to_json(self):
        return asdict(self)


@dataclass
class SendOtpEmailResponse:
    success: bool

    def to_json(self):
        return asdict(self)
