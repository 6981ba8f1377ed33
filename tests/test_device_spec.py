"""
Tests for decoding device-spec JSON documents.
"""

import json

import pytest
from pydantic import ValidationError

from bundle_inspect.utils.device_spec import DeviceSpec, SdkRuntime, parseDeviceSpecJson

PIXEL = """{
  "supportedAbis": ["arm64-v8a", "armeabi-v7a"],
  "supportedLocales": ["en-US", "fr-FR"],
  "screenDensity": 420,
  "sdkVersion": 33,
  "deviceFeatures": ["android.hardware.camera"],
  "glExtensions": ["GL_OES_EGL_image"],
  "sdkRuntime": {"supported": true}
}"""


class TestParseDeviceSpecJson:

    def test_full_document(self):
        spec = parseDeviceSpecJson(PIXEL)
        assert spec.supported_abis == ("arm64-v8a", "armeabi-v7a")
        assert spec.supported_locales == ("en-US", "fr-FR")
        assert spec.screen_density == 420
        assert spec.sdk_version == 33
        assert spec.device_features == ("android.hardware.camera",)
        assert spec.gl_extensions == ("GL_OES_EGL_image",)
        assert spec.sdk_runtime == SdkRuntime(supported=True)
        assert spec.device_tier is None
        assert spec.country_set is None

    def test_empty_object(self):
        assert parseDeviceSpecJson("{}") == DeviceSpec()

    def test_snake_case_names(self):
        spec = parseDeviceSpecJson('{"supported_abis": ["x86_64"], "sdk_version": "30", "device_tier": 1}')
        assert spec.supported_abis == ("x86_64",)
        assert spec.sdk_version == 30
        assert spec.device_tier == 1

    def test_null_means_default(self):
        spec = parseDeviceSpecJson('{"supportedAbis": null, "sdkVersion": null, "countrySet": null}')
        assert spec == DeviceSpec()

    def test_integral_float(self):
        assert parseDeviceSpecJson('{"screenDensity": 480.0}').screen_density == 480

    def test_frozen(self):
        spec = parseDeviceSpecJson(PIXEL)
        with pytest.raises(ValidationError):
            spec.sdk_version = 34

    @pytest.mark.parametrize("document, errorType", [
        ("not json", "json_invalid"),
        ('{"ram": 4}', "extra_forbidden"),
        ('{"sdkVersion": "thirty"}', "int_parsing"),
        ('{"sdkVersion": 30.5}', "int_from_float"),
        ('{"screenDensity": -1}', "greater_than_equal"),
        ('{"sdkVersion": 2147483648}', "less_than_equal"),
        ('{"supportedAbis": "arm64-v8a"}', "tuple_type"),
        ('{"supportedAbis": [1]}', "string_type"),
        ('{"sdkRuntime": {"enabled": true}}', "extra_forbidden"),
        ('{"sdkRuntime": {"supported": "yes"}}', "bool_type"),
    ])
    def test_malformed_documents(self, document, errorType):
        with pytest.raises(ValidationError) as excinfo:
            parseDeviceSpecJson(document)
        assert excinfo.value.errors()[0]["type"] == errorType

    def test_top_level_must_be_an_object(self):
        with pytest.raises(ValidationError):
            parseDeviceSpecJson("[]")

    def test_validation_error_is_value_error(self):
        assert issubclass(ValidationError, ValueError)


class TestToJson:

    def test_omits_defaults(self):
        assert json.loads(DeviceSpec(sdk_version=33).toJson()) == {"sdkVersion": 33}

    def test_decoded_document_is_preserved(self):
        assert json.loads(parseDeviceSpecJson(PIXEL).toJson()) == json.loads(PIXEL)
