import json
import tempfile
import unittest
from pathlib import Path

from wxunpack.unpacker.finalizer import ConfigWriter, PluginInjector


class TestConfigWriter(unittest.TestCase):
    def test_document_round_trips(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            out = ConfigWriter().write(td)

            self.assertEqual(str(Path(td) / 'project.private.config.json'), out)
            text = Path(out).read_text(encoding='utf-8')
            doc = json.loads(text)
            self.assertEqual({'description', 'setting'}, set(doc))
            self.assertIsInstance(doc['description'], str)
            self.assertEqual({'urlCheck': False}, doc['setting'])
            self.assertIn('\n  "setting": {\n    "urlCheck": false\n  }', text)

    def test_no_main_package(self) -> None:
        self.assertIsNone(ConfigWriter().write(None))


class TestPluginInjector(unittest.TestCase):
    def test_prepends_require(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            entry = Path(td) / 'game.js'
            entry.write_text('start();\n', encoding='utf-8')

            self.assertTrue(PluginInjector().inject(td))
            self.assertEqual(
                'require("./plugin");\nstart();\n',
                entry.read_text(encoding='utf-8')
            )

    def test_missing_entry_script(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            with self.assertLogs('wxunpack', level='WARNING') as logs:
                self.assertFalse(PluginInjector().inject(td))
            self.assertIn('plugin require was not written', logs.output[0])
            self.assertFalse((Path(td) / 'game.js').exists())


if __name__ == "__main__":
    unittest.main()
