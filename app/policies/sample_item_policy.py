from app.policies.application_policy import ApplicationPolicy


class SampleItemPolicy(ApplicationPolicy):
    """Anyone inside the tenant may read; members create; admins delete"""

    def index(self) -> bool:
        return True

    def show(self) -> bool:
        return True

    def create(self) -> bool:
        return self.user is not None

    def destroy(self) -> bool:
        return self.user is not None and self.user.is_admin
