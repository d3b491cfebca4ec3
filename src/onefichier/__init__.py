"""onefichier - An async Python client for the 1fichier.com API.

Example usage:
    import asyncio
    from onefichier import FichierClient

    async def main():
        async with FichierClient("my-api-key") as client:
            server = await client.get_upload_server()
            with open("report.pdf", "rb") as f:
                await client.upload_files(
                    server["id"],
                    [("file[]", ("report.pdf", f, "application/pdf"))],
                    server=server["url"],
                )
            result = await client.get_upload_result(
                server["id"], json=1, server=server["url"]
            )
            for link in result["links"]:
                print(link["download"])

    asyncio.run(main())
"""

from onefichier.client import DEFAULT_BASE_URL, FichierClient
from onefichier.config import FichierConfig, client_from_config, get_config
from onefichier.exceptions import (
    ApiStatusError,
    ConfigurationError,
    FichierError,
    ensure_ok,
)

__version__ = "0.1.0"

__all__ = [
    # Main client
    "FichierClient",
    "DEFAULT_BASE_URL",
    # Configuration
    "FichierConfig",
    "get_config",
    "client_from_config",
    # Exceptions
    "FichierError",
    "ConfigurationError",
    "ApiStatusError",
    "ensure_ok",
]
