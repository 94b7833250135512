"""Validation schemas for API requests using Marshmallow.

Schemas check types and presence only. Range and length rules belong to the
domain and are enforced by the player service.
"""

from datetime import datetime, timezone

from marshmallow import EXCLUDE, Schema, ValidationError, fields, post_load, validate

from game_players.domain.models import Player, PlayerOrder, Profession, Race


class EpochMillisDate(fields.Field):
    """Date carried on the wire as epoch milliseconds (UTC)."""

    default_error_messages = {"invalid": "Not a valid epoch-milliseconds timestamp."}

    def _serialize(self, value, attr, obj, **kwargs):
        if value is None:
            return None
        midnight = datetime(value.year, value.month, value.day, tzinfo=timezone.utc)
        return int(midnight.timestamp() * 1000)

    def _deserialize(self, value, attr, data, **kwargs):
        if isinstance(value, bool):
            raise self.make_error("invalid")
        try:
            millis = int(value)
            return datetime.fromtimestamp(millis / 1000, tz=timezone.utc).date()
        except (TypeError, ValueError, OverflowError, OSError) as error:
            raise self.make_error("invalid") from error


class PlayerSchema(Schema):
    """Serializes domain players to the public JSON shape."""

    id = fields.Int()
    name = fields.Str()
    title = fields.Str()
    race = fields.Enum(Race)
    profession = fields.Enum(Profession)
    birthday = EpochMillisDate()
    banned = fields.Bool()
    experience = fields.Int(strict=True)
    level = fields.Int()
    until_next_level = fields.Int(data_key="untilNextLevel")


class PlayerCreateSchema(Schema):
    """Schema for validating player creation requests."""

    class Meta:
        unknown = EXCLUDE

    name = fields.Str(required=True, error_messages={'required': 'Player name is required'})
    title = fields.Str(required=True, error_messages={'required': 'Player title is required'})
    race = fields.Enum(Race, required=True, error_messages={'required': 'Player race is required'})
    profession = fields.Enum(
        Profession,
        required=True,
        error_messages={'required': 'Player profession is required'}
    )
    birthday = EpochMillisDate(required=True, error_messages={'required': 'Player birthday is required'})
    banned = fields.Bool(load_default=False)
    experience = fields.Int(
        required=True,
        strict=True,
        error_messages={'required': 'Player experience is required'}
    )

    @post_load
    def make_player(self, data, **kwargs) -> Player:
        return Player(**data)


class PlayerUpdateSchema(Schema):
    """Schema for validating player update requests.

    Every field is optional; an absent or null field is left unchanged.
    """

    class Meta:
        unknown = EXCLUDE

    name = fields.Str(allow_none=True)
    title = fields.Str(allow_none=True)
    race = fields.Enum(Race, allow_none=True)
    profession = fields.Enum(Profession, allow_none=True)
    birthday = EpochMillisDate(allow_none=True)
    banned = fields.Bool(allow_none=True)
    experience = fields.Int(allow_none=True, strict=True)

    @post_load
    def make_player(self, data, **kwargs) -> Player:
        return Player(**data)


class PlayerFilterSchema(Schema):
    """Query-string filters shared by the list and count endpoints."""

    class Meta:
        unknown = EXCLUDE

    name = fields.Str()
    title = fields.Str()
    race = fields.Enum(Race)
    profession = fields.Enum(Profession)
    after = fields.Int()
    before = fields.Int()
    banned = fields.Bool()
    min_experience = fields.Int(data_key="minExperience")
    max_experience = fields.Int(data_key="maxExperience")
    min_level = fields.Int(data_key="minLevel")
    max_level = fields.Int(data_key="maxLevel")


class PlayerListSchema(PlayerFilterSchema):
    """Filters plus ordering and paging for the list endpoint."""

    order = fields.Method(deserialize="load_order")
    page_number = fields.Int(data_key="pageNumber", validate=validate.Range(min=0))
    page_size = fields.Int(data_key="pageSize", validate=validate.Range(min=1))

    def load_order(self, value):
        """Accept either the enum name (``NAME``) or its value (``name``)."""
        text = str(value)
        if text.upper() in PlayerOrder.__members__:
            return PlayerOrder[text.upper()]
        raise ValidationError(f"Must be one of: {', '.join(PlayerOrder.__members__)}.")


# Schema instances for reuse
player_schema = PlayerSchema()
players_schema = PlayerSchema(many=True)
player_create_schema = PlayerCreateSchema()
player_update_schema = PlayerUpdateSchema()
player_filter_schema = PlayerFilterSchema()
player_list_schema = PlayerListSchema()
