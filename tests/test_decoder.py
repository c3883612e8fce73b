import json
import unittest

from wxunpack.unpacker.decoder import (
    DecodeResult,
    DecoderLoadError,
    DecoderNotConfigured,
    SubpackageRequest,
    load_decoder
)


class TestLoadDecoder(unittest.TestCase):
    def test_callable_passes_through(self) -> None:
        fn = lambda path: None
        self.assertIs(fn, load_decoder(fn))

    def test_module_reference(self) -> None:
        self.assertIs(json.dumps, load_decoder('json:dumps'))

    def test_not_configured(self) -> None:
        with self.assertRaises(DecoderNotConfigured):
            load_decoder(None)

    def test_bad_references(self) -> None:
        for ref in ('json', 'json:', 'no_such_module_xyz:decode', 'json:missing', 'json:__doc__'):
            with self.subTest(ref=ref):
                with self.assertRaises(DecoderLoadError):
                    load_decoder(ref)


class TestDecodeResult(unittest.TestCase):
    def test_coerce(self) -> None:
        self.assertEqual(DecodeResult(), DecodeResult.coerce(None))

        result = DecodeResult(main_package='/out/app')
        self.assertIs(result, DecodeResult.coerce(result))

        coerced = DecodeResult.coerce({
            'main_package': '/out/app',
            'plugin_detected': 1,
            'subpackage_request': {
                'split_entry_script': 'split/game.js',
                'split_entry_dir': '/out/sub',
                'target_package_dir': '/out/sub/levels'
            }
        })
        self.assertEqual('/out/app', coerced.main_package)
        self.assertTrue(coerced.plugin_detected)
        self.assertEqual(
            SubpackageRequest('split/game.js', '/out/sub', '/out/sub/levels'),
            coerced.subpackage_request
        )

    def test_coerce_rejects_other_values(self) -> None:
        with self.assertRaises(TypeError):
            DecodeResult.coerce(42)


if __name__ == "__main__":
    unittest.main()
