"""Config show API command.

CLI: btexc config show
"""

from collections.abc import Iterator

from ..StageResult import StageResult


def cmd_show() -> StageResult:
    """Show the effective configuration."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        from .BtexConfig import BtexConfig

        yield (0.2, "Loading configuration...")
        config_path = BtexConfig.get_config_path()
        try:
            config = BtexConfig.load()
        except ValueError as e:
            result_obj.fail(e, config_path=str(config_path), content={})
            yield (1.0, "Complete")
            return

        result_obj.output = {
            "errors": [],
            "config_path": str(config_path),
            "content": config.to_dict(),
        }
        result_obj.result = f"Configuration loaded from {config_path}" if config_path.exists() else "Using defaults"
        result_obj.success = True
        yield (1.0, "Complete")

    return StageResult(
        announce="Loading configuration...",
        progress_callback=do_work,
    )
