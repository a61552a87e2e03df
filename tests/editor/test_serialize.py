"""Tests for folding a document into the profile update payload."""

from career_canvas.editor.builders import build_empty_block, build_initial_blocks
from career_canvas.editor.serialize import to_payload, to_profile_update
from career_canvas.models.blocks import ExperienceBlock, ExperienceEntry, SkillsBlock
from career_canvas.models.profile import Profile


class TestToPayload:
    """Test the To Payload."""

    def test_flattens_every_section(self, profile: Profile) -> None:
        payload = to_payload(build_initial_blocks(profile))

        assert payload["name"] == "Ada Lovelace"
        assert payload["github"] == "github.com/ada"
        assert payload["summary"] == "Analyst of engines."
        assert payload["skills"] == ["Python", "Mathematics"]
        assert payload["experience"] == [
            {
                "title": "Analyst",
                "company": "Babbage & Co",
                "location": "London",
                "start": "1842-01-01",
                "end": "1843-12-31",
                "description": "Wrote the notes.",
            }
        ]
        assert payload["projects"][0]["name"] == "Note G"

    def test_strips_entry_ids(self, profile: Profile) -> None:
        payload = to_payload(build_initial_blocks(profile))
        for key in ("experience", "education", "projects"):
            assert all("id" not in entry for entry in payload[key])

    def test_block_ids_and_view_state_are_not_sent(self, profile: Profile) -> None:
        blocks = build_initial_blocks(profile)
        blocks[0] = blocks[0].model_copy(update={"collapsed": True})
        payload = to_payload(blocks)
        assert "collapsed" not in payload
        assert "id" not in payload
        assert "type" not in payload

    def test_missing_sections_are_omitted(self) -> None:
        """Verify only keys for present blocks are sent."""
        payload = to_payload([build_empty_block("summary")])
        assert payload == {"summary": ""}

    def test_empty_document(self) -> None:
        assert to_payload([]) == {}

    def test_last_block_of_a_type_wins(self) -> None:
        document = [
            SkillsBlock(data=["first"]),
            ExperienceBlock(data=[ExperienceEntry(title="Kept")]),
            SkillsBlock(data=["second"]),
        ]
        payload = to_payload(document)
        assert payload["skills"] == ["second"]
        assert payload["experience"][0]["title"] == "Kept"

    def test_profile_update_marks_only_present_fields_set(self) -> None:
        update = to_profile_update([build_empty_block("skills")])
        assert update.model_fields_set == {"skills"}


def test_round_trip_preserves_scalar_values(profile: Profile) -> None:
    """Verify serialize then re-seed keeps every value, ignoring editor ids."""
    original = build_initial_blocks(profile)
    reseeded = build_initial_blocks(Profile.model_validate(to_payload(original)))

    def _strip(document: list) -> list:
        return [
            {"type": block.type, "data": to_payload([block])}
            for block in document
        ]

    assert _strip(reseeded) == _strip(original)
    assert [block.id for block in reseeded] != [block.id for block in original]
