#!/usr/bin/env python3
"""Start the Galleria Studio compositor API server."""

import uvicorn

from galleria.config import load_settings

if __name__ == "__main__":
    settings = load_settings()
    uvicorn.run(
        "galleria.api.main:create_app",
        factory=True,
        host="0.0.0.0",
        port=settings.port,
        reload=True,
        reload_dirs=["galleria"],
    )
