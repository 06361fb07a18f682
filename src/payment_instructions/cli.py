"""Command-line interface for payment instruction processing."""

import json
import os
import sys
import click
from typing import Any, Dict, Optional
import logging

import yaml

from .models.core import TransactionResult
from .parsers.instruction_parser import InstructionParser
from .processors.payment_service import PaymentService
from .utils.config_manager import ConfigManager
from .utils.error_handler import ErrorCategory, ErrorHandler


logger = logging.getLogger(__name__)


class PaymentInstructionsCLI:
    """Main CLI class for payment instruction processing"""

    def __init__(self, config_path: Optional[str] = None, verbose: bool = False):
        """Initialize CLI with configuration"""
        self.config_manager = ConfigManager(config_path)
        self.config = self.config_manager.load_config()
        self.error_handler = ErrorHandler(
            log_directory=self.config.log_directory,
            enable_console=self.config.enable_console_logging,
            log_level='DEBUG' if verbose else self.config.log_level
        )

        self.parser = InstructionParser()
        self.service = PaymentService(self.config, error_handler=self.error_handler)

    def load_request(self, request_path: str) -> Any:
        """Read a request payload from a JSON or YAML file

        Raises:
            OSError: If the file cannot be read
            ValueError: If the file content is not valid JSON or YAML
        """
        with open(request_path, 'r', encoding='utf-8') as f:
            if request_path.endswith(('.yml', '.yaml')):
                try:
                    return yaml.safe_load(f)
                except yaml.YAMLError as e:
                    raise ValueError(f"Invalid YAML in {request_path}: {e}") from e
            return json.load(f)

    def process_request_file(self, request_path: str) -> TransactionResult:
        payload = self.load_request(request_path)
        return self.service.handle(payload)

    def generate_config_template(self, output_path: str) -> bool:
        """Generate configuration template file"""
        try:
            self.config_manager.save_config_template(output_path)
            return True
        except OSError as e:
            self.error_handler.log_error(
                f"Failed to generate config template: {str(e)}",
                "CONFIG_TEMPLATE_ERROR",
                ErrorCategory.CONFIGURATION,
                exception=e,
                context={'output_path': output_path}
            )
            return False


def _dump(data: Dict[str, Any]) -> str:
    return json.dumps(data, indent=2)


# CLI Commands using Click
@click.group()
@click.option('--config', '-c', help='Path to configuration file')
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose logging')
@click.pass_context
def cli(ctx, config, verbose):
    """Payment Instructions - parse and apply transfer instructions"""
    ctx.ensure_object(dict)
    ctx.obj['cli'] = PaymentInstructionsCLI(config, verbose)


@cli.command()
@click.argument('instruction')
@click.pass_context
def parse(ctx, instruction):
    """Parse an instruction and print its fields as JSON"""
    cli_instance = ctx.obj['cli']
    parsed = cli_instance.parser.parse(instruction)
    click.echo(_dump(parsed.to_dict()))


@cli.command()
@click.argument('request_file', type=click.Path())
@click.option('--output', '-o', help='Write the result JSON to this file')
@click.option('--report', help='Write a JSON report of recorded failures to this file')
@click.pass_context
def process(ctx, request_file, output, report):
    """Process a request file holding accounts and an instruction"""
    cli_instance = ctx.obj['cli']

    try:
        result = cli_instance.process_request_file(request_file)
    except (OSError, ValueError) as e:
        cli_instance.error_handler.log_error(
            f"Could not read request file {request_file}: {e}",
            "REQUEST_FILE_ERROR",
            ErrorCategory.FILE_ACCESS,
            exception=e
        )
        click.echo(f"✗ Error reading request file: {str(e)}")
        sys.exit(1)

    body = _dump(result.to_dict())
    if output:
        output_dir = os.path.dirname(output)
        if output_dir:
            os.makedirs(output_dir, exist_ok=True)
        with open(output, 'w', encoding='utf-8') as f:
            f.write(body)
        click.echo(f"✓ Result written to {output} ({result.status.value}, {result.status_code.value})")
    else:
        click.echo(body)

    if report:
        report_path = cli_instance.error_handler.generate_error_report(report)
        click.echo(f"✓ Error report written to {report_path}", err=True)


@cli.command()
@click.argument('output_path', default='payment_config.json')
@click.option('--format', type=click.Choice(['json', 'yaml']), default='json', help='Configuration file format')
@click.pass_context
def init_config(ctx, output_path, format):
    """Generate configuration template file"""
    cli_instance = ctx.obj['cli']

    # Adjust extension based on format
    if format == 'yaml' and not output_path.endswith(('.yml', '.yaml')):
        output_path = output_path.replace('.json', '.yml')
    elif format == 'json' and not output_path.endswith('.json'):
        output_path = output_path.replace('.yml', '.json').replace('.yaml', '.json')

    if cli_instance.generate_config_template(output_path):
        click.echo(f"✓ Configuration template generated: {output_path}")
    else:
        click.echo("✗ Failed to generate configuration template")
        sys.exit(1)


@cli.command()
@click.option('--host', help='Bind host (default from configuration)')
@click.option('--port', type=int, help='Bind port (default from configuration)')
@click.pass_context
def serve(ctx, host, port):
    """Serve the HTTP API"""
    import uvicorn
    from .api import create_app

    cli_instance = ctx.obj['cli']
    config = cli_instance.config
    app = create_app(config)

    bind_host = host or config.api_host
    bind_port = port or config.api_port
    click.echo(f"Serving payment instructions API on http://{bind_host}:{bind_port}")
    uvicorn.run(app, host=bind_host, port=bind_port)


def main():
    cli(obj={})


if __name__ == '__main__':
    main()
