from dishka import Container, make_container

from rolegate.config import Config
from rolegate.domain.authorization.util.di import AuthorizationProvider
from rolegate.util.di.scope import Scope


def create_container(config: Config | None = None) -> Container:
    # Pydantic Settings populates from env vars at runtime
    config = config or Config()  # type: ignore[call-arg]

    return make_container(
        AuthorizationProvider(),
        context={Config: config},
        scopes=Scope,  # type: ignore[arg-type]  # Custom scope class
    )
