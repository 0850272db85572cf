from __future__ import annotations

from dependency_injector import containers, providers

from ..core.services import (
    DependencyResolver,
    EnvironmentPublisher,
    StepPipeline,
    URLNormalizer,
)
from ..core.usecases.run_step import RunStepUseCase
from ..core.usecases.show_config import ShowConfigUseCase
from ..infra.environment import OverlayEnvironment
from ..infra.lockfile import GemfileLock
from ..infra.logging import StepLogger
from ..infra.process_runner import SubprocessRunner
from ..infra.ruby import RubyInstallation


class Container(containers.DeclarativeContainer):
    """DI container; fill ``config`` with ``config.from_pydantic(AppConfig())``."""

    config = providers.Configuration()

    # Values masked in every log record
    secrets = providers.Object(())

    # Logger (Resource: manages lifecycle with init/shutdown)
    logger = providers.Resource(
        StepLogger,
        level=config.runtime.log_level,
        log_file=config.runtime.log_file,
        secrets=secrets,
    )

    # Adapters
    environment = providers.Singleton(OverlayEnvironment)

    runner = providers.Singleton(
        SubprocessRunner,
        environment=environment,
        logger=logger,
    )

    lockfile = providers.Singleton(
        GemfileLock,
        path=config.runtime.gemfile_lock,
    )

    ruby = providers.Singleton(RubyInstallation)

    # Domain services
    url_normalizer = providers.Factory(
        URLNormalizer,
        runner=runner,
        logger=logger,
        danger_bin=config.runtime.danger_bin,
        timeout=config.runtime.command_timeout,
    )

    publisher = providers.Factory(
        EnvironmentPublisher,
        environment=environment,
        logger=logger,
    )

    resolver = providers.Factory(
        DependencyResolver,
        runner=runner,
        lockfile=lockfile,
        ruby=ruby,
        logger=logger,
        gem_bin=config.runtime.gem_bin,
        timeout=config.runtime.command_timeout,
    )

    pipeline = providers.Factory(
        StepPipeline,
        url_normalizer=url_normalizer,
        publisher=publisher,
        resolver=resolver,
        runner=runner,
        logger=logger,
        bundle_bin=config.runtime.bundle_bin,
        danger_bin=config.runtime.danger_bin,
        command_timeout=config.runtime.command_timeout,
    )

    # Use cases
    run_step_uc = providers.Factory(
        RunStepUseCase,
        pipeline=pipeline,
    )

    show_config_uc = providers.Factory(ShowConfigUseCase)
