import logging
import sys

import typer
from azure.core.exceptions import AzureError, ClientAuthenticationError
from rich.markup import escape

from azs.core.commands import CommandPath
from azs.core.credentials import resolve_credential
from azs.core.dispatcher import FamilyCommand, dispatch
from azs.core.errors import StorageCliError
from azs.core.presenter import ResultPresenter, console_err
from azs.core.settings import ACCOUNT_ENV_VAR, Invocation

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool):
    log_level = logging.DEBUG if verbose else logging.ERROR
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )
    logging.getLogger("azure").setLevel(log_level)


def _report(prefix: str, error: Exception):
    console_err.print(f"[bold red]{prefix}:[/bold red] {escape(str(error))}")


def run_command(ctx: typer.Context, command: FamilyCommand) -> int:
    """
    Executes one leaf command and returns the process exit code.

    The credential is resolved for every leaf, the readme command included,
    but only service clients ever use it.
    """
    invocation = ctx.find_object(Invocation)
    if invocation is None:
        raise typer.BadParameter(
            f"an account is required, pass --account or set {ACCOUNT_ENV_VAR}",
            ctx=ctx,
            param_hint="'--account'",
        )

    setup_logging(invocation.verbose)
    path = CommandPath.from_context(ctx)

    try:
        credential = resolve_credential(invocation.access_key, invocation.account)
        logger.debug("Running '%s' with %s", path, type(credential).__name__)
        result = dispatch(command, credential, invocation)
    except ClientAuthenticationError as e:
        _report("Authentication Error", e)
        return 1
    except AzureError as e:
        _report("Azure Error", e)
        return 1
    except StorageCliError as e:
        _report("Error", e)
        return 1
    except OSError as e:
        _report("File Error", e)
        return 1

    ResultPresenter(result).print()
    return 0
