"""
Entry point for the YouTube transcript JSON-RPC server.
"""

import os
import argparse
import uvicorn
from dotenv import load_dotenv

from transcript_pro.api.stdio_server import serve_stdio
from transcript_pro.config import config


def main():
    """Run the server over stdio or HTTP."""
    # Load environment variables
    load_dotenv()

    # Parse command line arguments
    parser = argparse.ArgumentParser(description=f"{config.APP_NAME} server")
    parser.add_argument("--transport", choices=["stdio", "http"], default="stdio",
                        help="Serve JSON-RPC over stdin/stdout or HTTP")
    parser.add_argument("--host", default="0.0.0.0", help="Host to bind the HTTP server to")
    parser.add_argument("--port", type=int, default=8000, help="Port to bind the HTTP server to")
    parser.add_argument("--reload", action="store_true", help="Enable auto-reload for development")
    args = parser.parse_args()

    # Initialize directories
    config.initialize()

    if args.transport == "stdio":
        serve_stdio()
        return

    print(f"Starting {config.APP_NAME} server v{config.APP_VERSION}")
    print(f"Environment: {os.getenv('ENVIRONMENT', 'development')}")
    print(f"Binding to: {args.host}:{args.port}")

    uvicorn.run(
        "transcript_pro.api.app:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=config.LOG_LEVEL.lower() if hasattr(config, "LOG_LEVEL") else "info"
    )


if __name__ == "__main__":
    main()
