"""
Query tools - MCP tools for relational harmony queries.

Every argument of a query is optional; the ones left out are solved for.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from chuk_mcp_harmony.compiler import solutions_to_midi
from chuk_mcp_harmony.constants import DEFAULT_TOOL_LIMIT, MAX_TOOL_LIMIT, ErrorMessages
from chuk_mcp_harmony.core.interval import INTERVALS
from chuk_mcp_harmony.core.pitch import PitchClass
from chuk_mcp_harmony.models.config import EngineConfig
from chuk_mcp_harmony.queries import HarmonyQueries

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def _resolve_limit(limit: int | None) -> int:
    if limit is None:
        return DEFAULT_TOOL_LIMIT
    if not 1 <= limit <= MAX_TOOL_LIMIT:
        raise ValueError(ErrorMessages.INVALID_LIMIT.format(limit=limit, maximum=MAX_TOOL_LIMIT))
    return limit


def register_query_tools(
    mcp: ChukMCPServer,
    queries: HarmonyQueries,
    output_dir: Path,
) -> dict[str, Any]:
    """
    Register harmony query tools with the MCP server.

    Args:
        mcp: The MCP server instance
        queries: Query runner for the configured pitch space
        output_dir: Directory for exported MIDI files

    Returns:
        Dictionary of registered tool functions
    """
    tools: dict[str, Any] = {}

    def queries_for(preset: str | None) -> HarmonyQueries:
        if preset is None:
            return queries
        return HarmonyQueries(EngineConfig.for_preset(preset))

    @mcp.tool  # type: ignore[arg-type]
    async def harmony_note(
        pitch_class: str | None = None,
        octave: int | None = None,
        absolute_pitch: int | None = None,
        limit: int | None = None,
        preset: str | None = None,
    ) -> str:
        """
        Relate a pitch class, an octave and an absolute (MIDI) pitch.

        Give any subset of the three; the rest are solved for.

        Args:
            pitch_class: Pitch class name, enharmonics allowed (e.g., 'C', 'Db', 'F#')
            octave: Octave number (C4 = middle C)
            absolute_pitch: MIDI note number (C4 = 60)
            limit: Maximum number of solutions (default 24)
            preset: Pitch range preset ('midi' or 'piano')

        Returns:
            JSON string with the matching notes

        Example:
            harmony_note(pitch_class="C", octave=4)
            harmony_note(absolute_pitch=61)
            harmony_note(octave=4)
        """
        try:
            solutions = queries_for(preset).notes(
                pitch_class=pitch_class,
                octave=octave,
                absolute_pitch=absolute_pitch,
                limit=_resolve_limit(limit),
            )
            return json.dumps(
                {
                    "status": "success",
                    "count": len(solutions),
                    "notes": [solution.model_dump() for solution in solutions],
                }
            )
        except Exception as e:
            logger.exception("Failed to solve note query")
            return json.dumps({"status": "error", "message": str(e)})

    tools["harmony_note"] = harmony_note

    @mcp.tool  # type: ignore[arg-type]
    async def harmony_interval(
        interval: str,
        pitch_a: str | None = None,
        pitch_b: str | None = None,
        limit: int | None = None,
        preset: str | None = None,
    ) -> str:
        """
        Find pitch pairs a given interval apart, in either direction.

        Args:
            interval: Interval name or semitone count (e.g., 'major-third', 'M3', '4')
            pitch_a: First pitch, MIDI number or note name (e.g., '60', 'C4')
            pitch_b: Second pitch, MIDI number or note name
            limit: Maximum number of solutions (default 24)
            preset: Pitch range preset ('midi' or 'piano')

        Returns:
            JSON string with the matching pitch pairs

        Example:
            harmony_interval(interval="major-third", pitch_a="C4")
        """
        try:
            solutions = queries_for(preset).intervals(
                interval,
                pitch_a=pitch_a,
                pitch_b=pitch_b,
                limit=_resolve_limit(limit),
            )
            return json.dumps(
                {
                    "status": "success",
                    "count": len(solutions),
                    "intervals": [solution.model_dump() for solution in solutions],
                }
            )
        except Exception as e:
            logger.exception("Failed to solve interval query")
            return json.dumps({"status": "error", "message": str(e)})

    tools["harmony_interval"] = harmony_interval

    @mcp.tool  # type: ignore[arg-type]
    async def harmony_chord(
        quality: str,
        root: str | None = None,
        low: str | None = None,
        middle: str | None = None,
        high: str | None = None,
        limit: int | None = None,
        preset: str | None = None,
    ) -> str:
        """
        Find closed-position triad voicings.

        Root position, first inversion and second inversion are all
        considered. Fix any of the root or the three voices.

        Args:
            quality: Triad quality ('major', 'minor', 'diminished', 'augmented', 'sus2', 'sus4')
            root: Root pitch, MIDI number or note name
            low: Lowest voice
            middle: Middle voice
            high: Highest voice
            limit: Maximum number of solutions (default 24)
            preset: Pitch range preset ('midi' or 'piano')

        Returns:
            JSON string with the matching voicings

        Example:
            harmony_chord(quality="major", root="C4")
            harmony_chord(quality="minor", low="E4", high="C5")
        """
        try:
            solutions = queries_for(preset).chords(
                quality,
                root=root,
                low=low,
                middle=middle,
                high=high,
                limit=_resolve_limit(limit),
            )
            return json.dumps(
                {
                    "status": "success",
                    "count": len(solutions),
                    "chords": [solution.model_dump() for solution in solutions],
                }
            )
        except Exception as e:
            logger.exception("Failed to solve chord query")
            return json.dumps({"status": "error", "message": str(e)})

    tools["harmony_chord"] = harmony_chord

    @mcp.tool  # type: ignore[arg-type]
    async def harmony_export_chords(
        quality: str,
        output_name: str,
        root: str | None = None,
        low: str | None = None,
        limit: int | None = None,
        tempo: int = 90,
    ) -> str:
        """
        Export chord voicings to a MIDI file for listening.

        Each solution becomes a one-beat block chord.

        Args:
            quality: Triad quality (e.g., 'major', 'minor')
            output_name: Output filename (without .mid extension)
            root: Root pitch, MIDI number or note name
            low: Lowest voice
            limit: Maximum number of chords (default 24)
            tempo: Tempo in BPM

        Returns:
            JSON string with the file path

        Example:
            harmony_export_chords(quality="major", root="C4", output_name="c_major")
        """
        try:
            solutions = queries.chords(quality, root=root, low=low, limit=_resolve_limit(limit))
            midi = solutions_to_midi([s.pitches for s in solutions], tempo_bpm=tempo)

            output_path = output_dir / f"{output_name}.mid"
            output_dir.mkdir(parents=True, exist_ok=True)
            midi.save(str(output_path))

            return json.dumps(
                {
                    "status": "success",
                    "path": str(output_path),
                    "chords": len(solutions),
                    "message": f"Exported {len(solutions)} chords",
                }
            )
        except Exception as e:
            logger.exception("Failed to export chords")
            return json.dumps({"status": "error", "message": str(e)})

    tools["harmony_export_chords"] = harmony_export_chords

    @mcp.tool  # type: ignore[arg-type]
    async def harmony_list_intervals() -> str:
        """
        List interval names and their semitone distances.

        Returns:
            JSON string with every named interval
        """
        return json.dumps(
            {
                "status": "success",
                "intervals": [
                    {"name": name, "semitones": INTERVALS.distance_of(name)}
                    for name in INTERVALS.names
                ],
            }
        )

    tools["harmony_list_intervals"] = harmony_list_intervals

    @mcp.tool  # type: ignore[arg-type]
    async def harmony_list_pitch_classes() -> str:
        """
        List the 12 pitch classes with their enharmonic spellings.

        Returns:
            JSON string with position, name and aliases per pitch class
        """
        return json.dumps(
            {
                "status": "success",
                "pitch_classes": [
                    {"position": pc.value, "name": pc.spell(), "aliases": list(pc.aliases)}
                    for pc in PitchClass
                ],
            }
        )

    tools["harmony_list_pitch_classes"] = harmony_list_pitch_classes

    return tools
