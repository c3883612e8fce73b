import tempfile
import unittest
from pathlib import Path

from wxunpack.unpacker.decoder import SubpackageRequest
from wxunpack.unpacker.realigner import SubpackageRealigner


def snapshot(root: Path) -> dict:
    return {
        str(p.relative_to(root)): p.read_bytes()
        for p in sorted(root.rglob('*')) if p.is_file()
    }


class TestSubpackageRealigner(unittest.TestCase):
    def _split_package(self, root: Path) -> SubpackageRequest:
        split_dir = root / 'sub1'
        (split_dir / 'split' / 'img').mkdir(parents=True)
        (split_dir / 'split' / 'game.js').write_text(
            'console.log("level");\n//# sourceMappingURL=game.js.map\n', encoding='utf-8'
        )
        (split_dir / 'split' / 'img' / 'logo.png').write_bytes(b'\x89PNG\xff\xfe\x00')
        return SubpackageRequest(
            split_entry_script='split/game.js',
            split_entry_dir=str(split_dir),
            target_package_dir=str(root / 'app' / 'levels')
        )

    def test_relocates_and_removes_split_root(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            root = Path(td)
            request = self._split_package(root)
            seen = set()

            self.assertTrue(SubpackageRealigner(seen).realign(request))

            target = root / 'app' / 'levels'
            self.assertEqual(
                'console.log("level");\n',
                (target / 'game.js').read_text(encoding='utf-8')
            )
            self.assertEqual(b'\x89PNG\xff\xfe\x00', (target / 'img' / 'logo.png').read_bytes())
            self.assertFalse((root / 'sub1' / 'split').exists())
            self.assertIn(str(target), seen)

    def test_second_call_is_noop(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            root = Path(td)
            request = self._split_package(root)
            realigner = SubpackageRealigner()

            self.assertTrue(realigner.realign(request))
            after_first = snapshot(root)

            # Recreate the split dir: an already seen target must not be touched again
            self._split_package(root)
            (root / 'sub1' / 'split' / 'game.js').write_text('changed\n', encoding='utf-8')
            self.assertFalse(realigner.realign(request))

            self.assertEqual(
                after_first[str(Path('app') / 'levels' / 'game.js')],
                (root / 'app' / 'levels' / 'game.js').read_bytes()
            )

    def test_missing_entry_script_is_tolerated(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            root = Path(td)
            (root / 'sub1').mkdir()
            request = SubpackageRequest('split/game.js', str(root / 'sub1'), str(root / 'app'))
            seen = set()

            self.assertFalse(SubpackageRealigner(seen).realign(request))
            self.assertEqual(set(), seen)
            self.assertFalse((root / 'app').exists())

    def test_absent_request(self) -> None:
        self.assertFalse(SubpackageRealigner().realign(None))

    def test_entry_script_at_split_dir_top(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            root = Path(td)
            (root / 'sub1').mkdir()
            (root / 'sub1' / 'game.js').write_text('go();\n', encoding='utf-8')
            request = SubpackageRequest('game.js', str(root / 'sub1'), str(root / 'app' / 'pkg'))

            self.assertTrue(SubpackageRealigner().realign(request))
            self.assertEqual('go();\n', (root / 'app' / 'pkg' / 'game.js').read_text(encoding='utf-8'))
            self.assertFalse((root / 'sub1' / 'game.js').exists())


if __name__ == "__main__":
    unittest.main()
