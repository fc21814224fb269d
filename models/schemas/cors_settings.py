from marshmallow import EXCLUDE, Schema, fields, post_load, pre_load

from models.cors_policy import CorsSettings


def _split_csv(value):
    # Environment variables carry the list as "https://a.com,https://b.com"
    return value.split(",") if isinstance(value, str) else value


class CorsSettingsSchema(Schema):
    """Loads the raw `AllowedOrigins` section into a CorsSettings record.

    Entries are kept as-is (including blanks); filtering happens when the
    policy is built, so a malformed section never fails to load.
    """

    class Meta:
        unknown = EXCLUDE

    allowed_origins = fields.List(
        fields.Raw(allow_none=True),
        data_key="AllowedOrigins",
        allow_none=True,
        load_default=None,
    )

    @pre_load
    def normalize(self, data, **kwargs):
        if isinstance(data, dict) and "AllowedOrigins" in data:
            data = dict(data)
            raw = _split_csv(data["AllowedOrigins"])
            if isinstance(raw, dict):
                # {"0": "...", "1": "..."} style sections keep insertion order
                raw = list(raw.values())
            if raw is not None and not isinstance(raw, (list, tuple)):
                # a scalar such as a number is treated as a one-entry section
                raw = [raw]
            data["AllowedOrigins"] = raw
        return data

    @post_load
    def make_settings(self, data, **kwargs):
        origins = data.get("allowed_origins")
        return CorsSettings(allowed_origins=tuple(origins) if origins is not None else None)
