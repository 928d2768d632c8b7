# -----------------------------------------------------------------------------
# es7s/kolonki [Column-aligned colorized hex dumper]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
import sys
import types
import unittest

from kolonki import UnknownColumn
from kolonki.byteio.plugin import ProviderRegistry, display_utf8, display_dec
from kolonki.settings import SettingsManager


class BuiltinProvidersTestCase(unittest.TestCase):
    def test_utf8(self):
        self.assertEqual(display_utf8(b'A\xc3\xa9\xe2\x82\xac', 6, 0), 'Aé€')

    def test_utf8_replaces_undecodable_bytes(self):
        self.assertEqual(display_utf8(b'\x00A\xff\xc3', 4, 0), '�A��')

    def test_utf8_respects_length(self):
        self.assertEqual(display_utf8(b'ABCD', 2, 0), 'AB')

    def test_dec(self):
        self.assertEqual(display_dec(b'\x00\x0a\xff', 3, 0), '  0  10 255')
        self.assertEqual(display_dec(b'', 0, 0), '')


class ProviderRegistryTestCase(unittest.TestCase):
    MODULE_NAME = 'kolonki_test_plugin'

    def setUp(self) -> None:
        SettingsManager.init()
        self.registry = ProviderRegistry()

    def tearDown(self) -> None:
        sys.modules.pop(self.MODULE_NAME, None)

    def test_builtin(self):
        self.assertIs(self.registry.resolve('utf8'), display_utf8)
        self.assertIs(self.registry.resolve('dec'), display_dec)

    def test_name_suffix_is_ignored(self):
        self.assertIs(self.registry.resolve('utf8-text'), display_utf8)
        self.assertIs(self.registry.resolve('dec-a-b'), display_dec)

    def test_registered_provider_overrides_builtin(self):
        provider = lambda data, length, offset: 'custom'
        self.registry.register('utf8', provider)
        self.assertIs(self.registry.resolve('utf8-x'), provider)

    def test_register_non_callable(self):
        with self.assertRaises(TypeError):
            self.registry.register('foo', 'bar')

    def test_module_provider(self):
        module = types.ModuleType(self.MODULE_NAME)
        module.display = lambda data, length, offset: f'{offset}+{length}'
        sys.modules[self.MODULE_NAME] = module

        provider = self.registry.resolve(self.MODULE_NAME + '-suffix')
        self.assertEqual(provider(b'abc', 3, 16), '16+3')

    def test_module_without_provider(self):
        sys.modules[self.MODULE_NAME] = types.ModuleType(self.MODULE_NAME)
        with self.assertRaises(UnknownColumn):
            self.registry.resolve(self.MODULE_NAME)

    def test_missing_module(self):
        with self.assertRaises(UnknownColumn):
            self.registry.resolve('nonexistent_kolonki_plugin')

    def test_get_provider_name(self):
        self.assertEqual(ProviderRegistry.get_provider_name('foo-bar-baz'), 'foo')
        self.assertEqual(ProviderRegistry.get_provider_name('foo'), 'foo')


if __name__ == '__main__':
    unittest.main()
