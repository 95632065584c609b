"""CLI entry point for dictaphone."""

from __future__ import annotations

import asyncio
import re
import sys
from datetime import datetime
from pathlib import Path

import click

from dictaphone import __version__
from dictaphone.l1_entities.export_format import ExportFormat

_FORMAT_CHOICES = ['txt', 'srt', 'vtt']


def _make_session_dir(base_dir: Path, label: str | None) -> Path:
    """Create a timestamped session subdirectory under base_dir."""
    stamp = datetime.now().strftime('%Y-%m-%d_%H%M%S')
    if label:
        safe_label = re.sub(r'[^\w\-]', '_', label)
        name = f'{stamp}_{safe_label}'
    else:
        name = stamp
    session_dir = base_dir / name
    session_dir.mkdir(parents=True, exist_ok=True)
    return session_dir


def _build_overrides(
    output_dir: str | None,
    window: float | None,
    source_lang: str | None,
    target_lang: str | None,
    formats: tuple[str, ...],
) -> dict:
    overrides: dict = {}
    if output_dir:
        overrides['output'] = {'directory': output_dir}
    if window is not None:
        overrides['segmentation'] = {'window': window}
    translation = {}
    if source_lang:
        translation['source_language'] = source_lang
    if target_lang:
        translation['target_language'] = target_lang
    if translation:
        overrides['translation'] = translation
    if formats:
        overrides['export'] = {'formats': list(dict.fromkeys(formats))}
    return overrides


@click.command()
@click.argument('script', type=click.Path(exists=True, dir_okay=False))
@click.option(
    '-c',
    '--config',
    'config_path',
    default=None,
    type=click.Path(exists=True),
    help='Path to YAML config file.',
)
@click.option(
    '-o',
    '--output-dir',
    default=None,
    type=click.Path(),
    help='Base output directory (session subfolder created automatically).',
)
@click.option(
    '-l',
    '--label',
    default=None,
    help="Session label appended to the timestamp folder (e.g. 'standup').",
)
@click.option('-w', '--window', type=float, default=None, help='Segment window length in seconds.')
@click.option('-s', '--source-lang', default=None, help='Recognizer locale, e.g. en-US.')
@click.option('-t', '--target-lang', default=None, help='Translation target language, e.g. es.')
@click.option(
    '-f',
    '--format',
    'formats',
    multiple=True,
    type=click.Choice(_FORMAT_CHOICES),
    help='Export format (repeatable). Defaults to the configured formats.',
)
@click.option('--translate/--no-translate', default=False, help='Translate all segments after recording.')
@click.option('--realtime', is_flag=True, default=False, help='Sleep the tick interval between ticks.')
@click.version_option(version=__version__)
def cli(script, config_path, output_dir, label, window, source_lang, target_lang, formats, translate, realtime):
    """dictaphone -- replay a recognizer SCRIPT into timed TXT/SRT/VTT transcripts."""
    from pydantic import ValidationError  # noqa: PLC0415 -- deferred: not needed for --help

    from dictaphone.l1_entities.errors import (  # noqa: PLC0415 -- deferred: not needed for --help
        ConfigFormatError,
        ScriptFormatError,
    )
    from dictaphone.l3_interface_adapters.gateways.yaml_config_loader import (  # noqa: PLC0415 -- deferred: yaml stack not loaded on --help
        YamlConfigLoader,
    )
    from dictaphone.l3_interface_adapters.gateways.yaml_script_source import (  # noqa: PLC0415 -- deferred: yaml stack not loaded on --help
        YamlScriptSource,
    )
    from dictaphone.l4_frameworks_and_drivers.infra_config import (  # noqa: PLC0415 -- deferred: not needed for --help
        InfraConfig,
        build_app_config,
    )

    try:
        overrides = _build_overrides(output_dir, window, source_lang, target_lang, formats)
        raw = YamlConfigLoader().load_raw(config_path, overrides=overrides if overrides else None)
        config = build_app_config(raw)
        infra = InfraConfig.model_validate(raw)
        source = YamlScriptSource.from_path(Path(script))
    except (FileNotFoundError, ConfigFormatError, ScriptFormatError, ValidationError) as e:
        click.echo(f'Error: {e}', err=True)
        sys.exit(1)

    if source_lang:
        # an explicit flag beats the language recorded in the script
        source = YamlScriptSource(source.events(), source.stop_at, source_lang)

    base_dir = Path(config.output.directory)
    out_dir = _make_session_dir(base_dir, label)

    from dictaphone.l4_frameworks_and_drivers.container import (  # noqa: PLC0415 -- deferred: gateways not loaded on --help
        DependencyContainer,
    )
    from dictaphone.l4_frameworks_and_drivers.logging_setup import (  # noqa: PLC0415 -- deferred: not needed for --help
        setup_file_logging,
    )
    from dictaphone.l4_frameworks_and_drivers.session_runner import (  # noqa: PLC0415 -- deferred: not needed for --help
        SessionRunner,
    )

    setup_file_logging(out_dir)
    if translate:
        _preflight_translator(infra, config)

    container = DependencyContainer(config, out_dir, infra=infra)
    runner = SessionRunner(
        container.controller,
        source,
        tick_interval=config.segmentation.tick_interval if realtime else 0.0,
        on_segment=lambda seg: click.echo(f'  [{seg.start_time:g}s - {seg.end_time:g}s] {seg.original_text}', err=True),
    )

    click.echo(f'Replaying {script} (window {config.segmentation.window:g}s)...', err=True)
    summary = asyncio.run(
        runner.run(
            config.export.formats,
            translate=translate,
            include_translated=config.export.include_translated,
        )
    )

    if summary.translation is not None:
        click.echo(summary.translation.message, err=True)
    if not summary.segments:
        click.echo('No speech captured; exported empty documents.', err=True)

    click.echo(f'\nSaved to {out_dir}:', err=True)
    for result in summary.exports:
        click.echo(f'  {result.filename}  ({result.cue_count} cues, {result.fmt.media_type})', err=True)

    txt = container.controller.export(ExportFormat.TXT, save=False)
    if txt.content:
        click.echo(txt.content)


def _preflight_translator(infra, config) -> None:
    from dictaphone.l4_frameworks_and_drivers.container import (  # noqa: PLC0415 -- deferred: preflight only runs when translating
        DependencyContainer,
    )

    client = DependencyContainer.build_llm_client(infra)
    if client is None:
        return
    ok, err = client.check_connectivity()
    if not ok:
        click.echo(f'Warning: translator backend not reachable ({err}). Segments will stay untranslated.', err=True)
        return
    if client.check_models([config.translation.model]):
        click.echo(f'Warning: translation model {config.translation.model!r} is not available.', err=True)
