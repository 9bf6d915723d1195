"""Tests for the transform option encoder."""

from transforms import TransformOptions, encode, encode_gradient, encode_layer, layer_id


class TestEncode:
    def test_defaults_emit_auto_tokens(self):
        assert encode(None) == "w_auto,h_auto,c_fill,q_auto,f_webp,dpr_auto"
        assert encode({}) == encode(TransformOptions())

    def test_thumb_example(self):
        opts = {"width": 80, "height": 80, "crop": "thumb", "quality": "auto", "format": "webp"}
        assert encode(opts) == "w_80,h_80,c_thumb,q_auto,f_webp,dpr_auto"

    def test_deterministic_regardless_of_key_order(self):
        a = {"width": 300, "gravity": "face", "flags": "progressive", "crop": "fit"}
        b = {"crop": "fit", "flags": "progressive", "gravity": "face", "width": 300}
        assert encode(a) == encode(a)
        assert encode(a) == encode(b)

    def test_center_gravity_never_emitted(self):
        assert "g_" not in encode({"gravity": "center"})
        assert "g_" not in encode(TransformOptions(width=10))

    def test_non_center_gravity_changes_output(self):
        base = {"width": 120, "height": 90}
        for gravity in ("face", "north", "auto"):
            assert encode({**base, "gravity": gravity}) != encode({**base, "gravity": "center"})
            assert encode({**base, "gravity": gravity}).endswith(f"g_{gravity}")

    def test_flags_only_when_non_empty(self):
        assert "fl_" not in encode({"flags": ""})
        assert encode({"flags": "face_center", "gravity": "face"}).endswith("g_face,fl_face_center")

    def test_radius_follows_flags(self):
        encoded = encode({"gravity": "face", "flags": "progressive", "radius": "max"})
        assert encoded.endswith("g_face,fl_progressive,r_max")

    def test_invalid_values_pass_through(self):
        assert "c_stretch" in encode({"crop": "stretch"})
        assert "w_wide" in encode({"width": "wide"})

    def test_unknown_and_none_keys_ignored(self):
        assert encode({"width": None, "colour": "red"}) == encode({})


class TestLayers:
    def test_layer_id_uses_colons(self):
        assert layer_id("logo/tuneatlife-icon") == "logo:tuneatlife-icon"

    def test_layer_group(self):
        assert encode_layer("logo/tuneatlife-icon", 30) == "l_logo:tuneatlife-icon,o_30,fl_layer_apply"

    def test_gradient_group(self):
        assert encode_gradient("purple") == "l_gradient:purple,fl_layer_apply"
