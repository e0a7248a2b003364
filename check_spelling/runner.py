"""Install-then-run sequencing for CHECK-SPELLING.

The steps run strictly one after another:

    list installed -> (install if missing) -> run typos

A failing list or install step raises and stops the sequence before
typos runs; the exception carries that step's exit status. The typos
exit status is returned unchanged.
"""

from check_spelling.config.settings import Settings
from check_spelling.integrations.cargo import CargoClient
from check_spelling.integrations.typos import TyposClient, describe_version_drift
from check_spelling.utils.console import print_info
from check_spelling.utils.logging import log_message


def ensure_tool_installed(settings: Settings, cargo: CargoClient | None = None) -> bool:
    """Make sure the pinned tool release is installed.

    Args:
        settings: Settings naming the package and exact version
        cargo: Package manager client (defaults to one for settings.package_manager)

    Returns:
        True if an install was performed, False if it was already present

    Raises:
        QueryFailedError: If listing installed packages fails
        InstallFailedError: If the install fails
    """
    cargo = cargo or CargoClient(settings.package_manager)
    package_spec = settings.package_spec

    installed = cargo.installed_version(settings.tool_package)
    if installed == settings.tool_version:
        print_info(f"{package_spec} is already installed.")
        return False

    if installed is not None:
        drift = describe_version_drift(installed, settings.tool_version)
        if drift == "different":
            print_info(
                f"Found {settings.tool_package} {installed}, required {settings.tool_version}"
            )
        else:
            print_info(
                f"Found {settings.tool_package} {installed}, which is {drift} than the "
                f"required {settings.tool_version}"
            )

    print_info(f"Installing {package_spec}...")
    cargo.install(settings.tool_package, settings.tool_version)
    log_message(f"Installed {package_spec}")
    return True


def run_tool(
    settings: Settings, target: str | None = None, typos: TyposClient | None = None
) -> int:
    """Run the tool against the target path and return its exit status."""
    typos = typos or TyposClient(settings.tool_executable)
    return typos.run(target)


def run_spell_check(
    settings: Settings,
    target: str | None = None,
    cargo: CargoClient | None = None,
    typos: TyposClient | None = None,
) -> int:
    """Ensure the pinned tool is installed, then run it.

    Args:
        settings: Tool and package manager settings
        target: Path to scan; None or empty scans the current directory
        cargo: Optional package manager client override
        typos: Optional tool client override

    Returns:
        The tool's exit status

    Raises:
        QueryFailedError: If listing installed packages fails
        InstallFailedError: If the install fails
    """
    ensure_tool_installed(settings, cargo)
    return run_tool(settings, target, typos)


__all__ = [
    "ensure_tool_installed",
    "run_tool",
    "run_spell_check",
]
