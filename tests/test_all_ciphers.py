"""
Comprehensive tests for all cipher engines.
"""
import pytest

from app.models.schemas import CipherCategory, CipherType
from app.services.engines.registry import EngineRegistry


class TestCipherRegistry:
    """Test the cipher registry."""

    def test_all_ciphers_registered(self):
        """Verify every cipher type is registered, in catalog order."""
        assert EngineRegistry.list_registered() == list(CipherType)

    def test_get_engines_by_category(self):
        """Test getting engines by cipher category."""
        registry = EngineRegistry()

        counts = {
            CipherCategory.SUBSTITUTION: 10,  # incl. RSA, Morbit, Pollux
            CipherCategory.POLYALPHABETIC: 3,  # Porta, Vigenere, Fractionated Morse
            CipherCategory.POLYGRAPHIC: 4,  # Nihilist, Checkerboard, Hill 2x2/3x3
            CipherCategory.TRANSPOSITION: 2,  # Columnar, Rail Fence
            CipherCategory.ENCODING: 2,  # Baconian, Dancing Men
            CipherCategory.PUZZLE: 1,  # Cryptarithm
        }
        for category, expected in counts.items():
            assert len(registry.get_engines_by_category(category)) == expected

    def test_engines_are_shared_instances(self):
        registry = EngineRegistry()
        assert registry.get_engine(CipherType.CAESAR) is registry.get_engine(CipherType.CAESAR)

    @pytest.mark.parametrize("cipher_type", list(CipherType))
    def test_never_raises_on_garbage(self, cipher_type):
        """Malformed parameters fall back to defaults; both directions return strings."""
        engine = EngineRegistry().get_engine(cipher_type)
        params = {
            "shift": "abc", "a": "x", "b": None, "key": "", "keyword": "123",
            "polybius_key": "!!", "blank_positions": "z", "matrix": "bad",
            "rails": "many", "mapping": 42, "n": "q", "e": -1, "d": 0,
        }
        text = "Hello, World! 123 ¿Qué?"

        assert isinstance(engine.encrypt(text, params), str)
        assert isinstance(engine.decrypt(text, params), str)
        assert isinstance(engine.encrypt("", params), str)
        assert isinstance(engine.decrypt("", None), str)

    @pytest.mark.parametrize("cipher_type", list(CipherType))
    def test_malformed_params_match_defaults(self, cipher_type):
        engine = EngineRegistry().get_engine(cipher_type)
        params = {"shift": "abc", "keyword": "123", "matrix": "bad", "rails": "many", "mapping": 42}
        assert engine.encrypt("HELLO WORLD", params) == engine.encrypt("HELLO WORLD")


class TestMonoalphabeticCiphers:
    """Test monoalphabetic cipher engines."""

    @pytest.fixture
    def registry(self):
        return EngineRegistry()

    def test_atbash_self_reciprocal(self, registry):
        """Atbash applied twice should return original text."""
        engine = registry.get_engine(CipherType.ATBASH)
        plaintext = "Hello, World!"

        encrypted = engine.encrypt(plaintext)

        assert encrypted == "Svool, Dliow!"
        assert engine.encrypt(encrypted) == plaintext
        assert engine.decrypt(encrypted) == plaintext

    def test_affine_known_example(self, registry):
        engine = registry.get_engine(CipherType.AFFINE)
        assert engine.encrypt("AFFINE CIPHER", {"a": 5, "b": 8}) == "IHHWVC SWFRCP"

    def test_affine_encrypt_decrypt(self, registry):
        """Test Affine cipher encrypt/decrypt roundtrip with custom a, b."""
        engine = registry.get_engine(CipherType.AFFINE)
        params = {"a": 7, "b": 3}

        encrypted = engine.encrypt("Meet me at noon", params)

        assert engine.decrypt(encrypted, params) == "Meet me at noon"

    def test_affine_non_invertible_a(self, registry):
        engine = registry.get_engine(CipherType.AFFINE)
        assert engine.decrypt("ABC", {"a": 13, "b": 1}) == (
            "Cannot decrypt: a=13 has no inverse modulo 26"
        )

    def test_aristocrat_known_example(self, registry):
        """The default key expands from ZEBRAS."""
        engine = registry.get_engine(CipherType.ARISTOCRAT)

        encrypted = engine.encrypt("Hello, World!")

        assert encrypted == "DAIIL, VLOIR!"
        assert engine.decrypt(encrypted) == "HELLO, WORLD!"
        assert engine.default_key() == "ZEBRASCDFGHIJKLMNOPQTUVWXY"

    def test_aristocrat_keyword(self, registry):
        engine = registry.get_engine(CipherType.ARISTOCRAT)
        params = {"key": "KEYWORD"}

        encrypted = engine.encrypt("THE QUICK BROWN FOX", params)

        assert encrypted.count(" ") == 3
        assert engine.decrypt(encrypted, params) == "THE QUICK BROWN FOX"

    def test_patristocrat_strips_non_letters(self, registry):
        engine = registry.get_engine(CipherType.PATRISTOCRAT)

        encrypted = engine.encrypt("Hello, World!")

        assert encrypted == "DAIILVLOIR"
        assert engine.decrypt(encrypted) == "HELLOWORLD"

    def test_misspelled_roundtrip(self, registry):
        engine = registry.get_engine(CipherType.ARISTOCRAT_MISSPELLED)
        aristocrat = registry.get_engine(CipherType.ARISTOCRAT)
        plaintext = "THE CAT AND YOU"

        encrypted = engine.encrypt(plaintext)

        assert encrypted == aristocrat.encrypt("TEH CAT NAD YUO")
        assert engine.decrypt(encrypted) == plaintext

    def test_misspelled_whole_words_only(self, registry):
        engine = registry.get_engine(CipherType.ARISTOCRAT_MISSPELLED)
        aristocrat = registry.get_engine(CipherType.ARISTOCRAT)

        assert engine.encrypt("THEN BAND") == aristocrat.encrypt("THEN BAND")

    def test_misspelled_is_lossy(self, registry):
        """A genuine misspelled form in the plaintext is 'corrected' on decrypt."""
        engine = registry.get_engine(CipherType.ARISTOCRAT_MISSPELLED)
        assert engine.decrypt(engine.encrypt("WIT")) == "WITH"

    def test_xenocrypt_spanish_alphabet(self, registry):
        engine = registry.get_engine(CipherType.XENOCRYPT)
        params = {"keyword": "CRYPTO"}

        encrypted = engine.encrypt("El niño comió", params)

        assert engine.decrypt(encrypted, params) == "EL NIÑO COMIO"
        assert len(engine.default_key()) == 27
        assert engine.default_key().endswith("Ñ")


class TestPolyalphabeticCiphers:
    """Test polyalphabetic cipher engines."""

    @pytest.fixture
    def registry(self):
        return EngineRegistry()

    def test_vigenere_known_example(self, registry):
        """Classic LEMON example; spaces do not consume key letters."""
        engine = registry.get_engine(CipherType.VIGENERE)

        encrypted = engine.encrypt("ATTACK AT DAWN", {"keyword": "LEMON"})

        assert encrypted == "LXFOPV EF RNHR"

    def test_vigenere_encrypt_decrypt(self, registry):
        engine = registry.get_engine(CipherType.VIGENERE)
        params = {"keyword": "Secret Key!"}

        encrypted = engine.encrypt("Meet me at the usual place.", params)

        assert engine.decrypt(encrypted, params) == "MEET ME AT THE USUAL PLACE."

    def test_porta_self_reciprocal(self, registry):
        engine = registry.get_engine(CipherType.PORTA)
        params = {"keyword": "CRYPTO"}
        plaintext = "DEFENDTHEEASTWALLOFTHECASTLE"

        encrypted = engine.encrypt(plaintext, params)

        assert encrypted != plaintext
        assert engine.encrypt(encrypted, params) == plaintext
        assert engine.decrypt(encrypted, params) == plaintext

    def test_porta_letter_halves_swap(self, registry):
        """Porta always maps A-M to N-Z and back."""
        engine = registry.get_engine(CipherType.PORTA)

        encrypted = engine.encrypt("ABCDEFGHIJKLM", {"keyword": "XY"})

        assert all(char >= "N" for char in encrypted)

    def test_fractionated_morse_roundtrip(self, registry):
        engine = registry.get_engine(CipherType.FRACTIONATED_MORSE)
        params = {"keyword": "ROUNDTABLE"}

        encrypted = engine.encrypt("Come at once 1", params)

        assert encrypted.isalpha() and encrypted.isupper()
        assert engine.decrypt(encrypted, params) == "COMEATONCE1"

    def test_fractionated_morse_first_triplet(self, registry):
        """E is '.', so 'EE' starts with '.x.' in the Morse stream."""
        engine = registry.get_engine(CipherType.FRACTIONATED_MORSE)
        table = "CRYPTOABDEFGHIJKLMNQSUVWXZ"
        # ".x." is triplet number 0*9 + 2*3 + 0 = 6
        assert engine.encrypt("EE", {"keyword": "CRYPTO"})[0] == table[6]


class TestMorseDigitCiphers:
    """Test Pollux and Morbit."""

    @pytest.fixture
    def registry(self):
        return EngineRegistry()

    def test_pollux_known_example(self, registry):
        engine = registry.get_engine(CipherType.POLLUX)

        encrypted = engine.encrypt("HI")

        # .... x .. xxxx
        assert encrypted == "5555 55    "
        assert engine.decrypt(encrypted) == "HI"

    def test_pollux_custom_mapping(self, registry):
        engine = registry.get_engine(CipherType.POLLUX)
        params = {"mapping": ".=1,-=2"}

        encrypted = engine.encrypt("SOS 2024", params)

        assert set(encrypted) <= {"1", "2", " "}
        assert engine.decrypt(encrypted, params) == "SOS2024"

    def test_pollux_duplicate_digits_fall_back(self, registry):
        engine = registry.get_engine(CipherType.POLLUX)
        assert engine.encrypt("E", {"mapping": {".": "1", "-": "1"}}) == engine.encrypt("E")

    def test_morbit_known_example(self, registry):
        engine = registry.get_engine(CipherType.MORBIT)

        encrypted = engine.encrypt("HI")

        # ....x..xxxx -> 11113113333
        assert encrypted == "11 11 31 13 33 3"
        assert engine.decrypt(encrypted) == "HI"

    def test_morbit_roundtrip(self, registry):
        engine = registry.get_engine(CipherType.MORBIT)
        params = {"mapping": {".": 7, "-": 4, "x": 0}}

        encrypted = engine.encrypt("Once upon a time", params)

        assert engine.decrypt(encrypted, params) == "ONCEUPONATIME"
        assert engine.decrypt(encrypted.replace(" ", ""), params) == "ONCEUPONATIME"


class TestTranspositionCiphers:
    """Test transposition cipher engines."""

    @pytest.fixture
    def registry(self):
        return EngineRegistry()

    def test_rail_fence_known_example(self, registry):
        engine = registry.get_engine(CipherType.RAIL_FENCE)
        plaintext = "WEAREDISCOVEREDFLEEATONCE"

        encrypted = engine.encrypt(plaintext, {"rails": 3})

        assert encrypted == "WECRLTEERDSOEEFEAOCAIVDEN"
        assert engine.decrypt(encrypted, {"rails": 3}) == plaintext

    @pytest.mark.parametrize("rails", [2, 3, 4, 5, 7, 30])
    def test_rail_fence_encrypt_decrypt(self, registry, rails):
        engine = registry.get_engine(CipherType.RAIL_FENCE)
        plaintext = "Thequickbrownfoxjumpsoverthelazydog"

        encrypted = engine.encrypt(plaintext, {"rails": rails})

        assert engine.decrypt(encrypted, {"rails": rails}) == plaintext.upper()

    def test_rail_fence_minimum_two_rails(self, registry):
        engine = registry.get_engine(CipherType.RAIL_FENCE)
        assert engine.encrypt("HELLO", {"rails": 1}) == engine.encrypt("HELLO", {"rails": 2})

    def test_rail_fence_huge_rail_count(self, registry):
        """More rails than letters reads the text straight down the fence."""
        engine = registry.get_engine(CipherType.RAIL_FENCE)
        params = {"rails": 1_000_000_000}

        encrypted = engine.encrypt("WEAREDISCOVERED", params)

        assert encrypted == engine.encrypt("WEAREDISCOVERED", {"rails": 15})
        assert encrypted == "WEAREDISCOVERED"
        assert engine.decrypt(encrypted, params) == "WEAREDISCOVERED"

    def test_columnar_known_example(self, registry):
        engine = registry.get_engine(CipherType.COLUMNAR)

        encrypted = engine.encrypt("HELLOWORLD", {"keyword": "CRYPTO"})

        assert encrypted == "HOWXLDEROXLL"
        assert engine.decrypt(encrypted, {"keyword": "CRYPTO"}) == "HELLOWORLD"

    def test_columnar_encrypt_decrypt(self, registry):
        engine = registry.get_engine(CipherType.COLUMNAR)
        params = {"keyword": "ZEBRAS"}

        encrypted = engine.encrypt("We are discovered. Flee at once!", params)

        assert encrypted == "EVLNXACDTXESEAXROFOXDEECXWIREE"
        assert engine.decrypt(encrypted, params) == "WEAREDISCOVEREDFLEEATONCE"

    def test_columnar_keeps_interior_x(self, registry):
        engine = registry.get_engine(CipherType.COLUMNAR)
        params = {"keyword": "KEY"}

        assert engine.decrypt(engine.encrypt("XAXBX", params), params) == "XAXB"


class TestPolygraphicCiphers:
    """Test polygraphic cipher engines."""

    @pytest.fixture
    def registry(self):
        return EngineRegistry()

    def test_hill_known_example(self, registry):
        engine = registry.get_engine(CipherType.HILL_2X2)
        assert engine.encrypt("HELP") == "HIAT"

    def test_hill_encrypt_decrypt(self, registry):
        engine = registry.get_engine(CipherType.HILL_2X2)
        plaintext = "SHORTEXAMPLE"

        encrypted = engine.encrypt(plaintext, {"matrix": [[3, 3], [2, 5]]})

        assert engine.decrypt(encrypted, {"matrix": [[3, 3], [2, 5]]}) == plaintext

    def test_hill_pads_with_x(self, registry):
        engine = registry.get_engine(CipherType.HILL_2X2)
        assert engine.decrypt(engine.encrypt("ABC")) == "ABCX"

    def test_hill_matrix_formats(self, registry):
        engine = registry.get_engine(CipherType.HILL_2X2)
        expected = engine.encrypt("CIPHER", {"matrix": [[5, 17], [4, 15]]})

        assert engine.encrypt("CIPHER", {"matrix": [5, 17, 4, 15]}) == expected
        assert engine.encrypt("CIPHER", {"matrix": "5 17; 4 15"}) == expected

    def test_hill_non_invertible_matrix(self, registry):
        """det = -8 shares a factor with 26, so decryption collapses to A's."""
        engine = registry.get_engine(CipherType.HILL_2X2)
        assert engine.decrypt("HELP", {"matrix": [[2, 4], [6, 8]]}) == "AAAA"

    def test_hill_3x3_encrypt_decrypt(self, registry):
        engine = registry.get_engine(CipherType.HILL_3X3)

        encrypted = engine.encrypt("Attack at dawn")

        assert len(encrypted) == 12
        assert engine.decrypt(encrypted) == "ATTACKATDAWN"

    def test_nihilist_encrypt_decrypt(self, registry):
        engine = registry.get_engine(CipherType.NIHILIST)
        params = {"keyword": "CRYPTO", "polybius_key": "CRYPTO"}

        encrypted = engine.encrypt("HELLO", params)

        assert all(token.isdigit() for token in encrypted.split(" "))
        assert engine.decrypt(encrypted, params) == "HELLO"

    def test_nihilist_folds_j(self, registry):
        engine = registry.get_engine(CipherType.NIHILIST)
        assert engine.decrypt(engine.encrypt("JUMP")) == "IUMP"

    def test_nihilist_oversized_number(self, registry):
        """A number too long to convert decrypts to a placeholder."""
        engine = registry.get_engine(CipherType.NIHILIST)
        encrypted = engine.encrypt("HI")

        assert engine.decrypt("9" * 5000) == "?"
        assert engine.decrypt(f"{encrypted} {'9' * 5000}") == "HI?"

    def test_checkerboard_known_example(self, registry):
        """Board for CRYPTO with blanks 2,6: C0 R1 Y3 P4 T5 O7 A8 B9, then 20-29, 60-66."""
        engine = registry.get_engine(CipherType.CHECKERBOARD)

        encrypted = engine.encrypt("HELLO")

        assert encrypted == "242127277"
        assert engine.decrypt(encrypted) == "HELLO"

    def test_checkerboard_custom_blanks(self, registry):
        engine = registry.get_engine(CipherType.CHECKERBOARD)
        params = {"key": "SECRET", "blank_positions": [0, 9]}

        encrypted = engine.encrypt("Attack at dawn", params)

        assert engine.decrypt(encrypted, params) == "ATTACKATDAWN"

    @pytest.mark.parametrize("blanks", ["2", [4], "", "x,y"])
    def test_checkerboard_too_few_blanks_use_default(self, registry, blanks):
        """One blank row leaves letters without a code, so the default board is used."""
        engine = registry.get_engine(CipherType.CHECKERBOARD)
        params = {"key": "SECRET", "blank_positions": blanks}

        encrypted = engine.encrypt("SUVWXZ", params)

        assert encrypted == engine.encrypt("SUVWXZ", {"key": "SECRET", "blank_positions": "2,6"})
        assert engine.decrypt(encrypted, params) == "SUVWXZ"


class TestEncodingCiphers:
    """Test encoding and puzzle engines."""

    @pytest.fixture
    def registry(self):
        return EngineRegistry()

    def test_baconian_known_example(self, registry):
        engine = registry.get_engine(CipherType.BACONIAN)

        encrypted = engine.encrypt("CIPHER")

        assert encrypted == "AAABA ABAAA ABBBA AABBB AABAA BAAAA"
        assert engine.decrypt(encrypted) == "CIPHER"

    def test_baconian_is_lossy(self, registry):
        """J reads back as I and V as U."""
        engine = registry.get_engine(CipherType.BACONIAN)
        assert engine.decrypt(engine.encrypt("JUMP VIA")) == "IUMP UIA"

    def test_baconian_unknown_groups_pass_through(self, registry):
        engine = registry.get_engine(CipherType.BACONIAN)
        assert engine.decrypt("AABBB ABAAA !") == "HI!"

    def test_dancing_men_roundtrip(self, registry):
        engine = registry.get_engine(CipherType.DANCING_MEN)

        encrypted = engine.encrypt("Hello there")

        assert "🚶" in encrypted
        assert engine.decrypt(encrypted) == "HELLO THERE"

    def test_dancing_men_v_and_w_collide(self, registry):
        engine = registry.get_engine(CipherType.DANCING_MEN)
        assert engine.decrypt(engine.encrypt("VOW")) == "VOV"

    def test_dancing_men_glyphs_with_variation_selectors(self, registry):
        engine = registry.get_engine(CipherType.DANCING_MEN)
        assert engine.decrypt(engine.encrypt("RT")) == "RT"

    def test_dancing_men_custom_mapping(self, registry):
        engine = registry.get_engine(CipherType.DANCING_MEN)
        params = {"mapping": {"a": "*", "b": "#"}}

        assert engine.encrypt("abc", params) == "*#C"
        assert engine.decrypt("*#C", params) == "ABC"

    def test_rsa_known_example(self, registry):
        """H=8: 8^3 mod 33 = 17; I=9: 9^3 mod 33 = 3."""
        engine = registry.get_engine(CipherType.RSA)

        encrypted = engine.encrypt("Hi!")

        assert encrypted == "17 03"
        assert engine.decrypt(encrypted) == "HI"

    def test_rsa_out_of_range(self, registry):
        engine = registry.get_engine(CipherType.RSA)
        # 0 decrypts to 0, which is not a letter
        assert engine.decrypt("00 17") == "?H"

    def test_rsa_oversized_number(self, registry):
        engine = registry.get_engine(CipherType.RSA)
        assert engine.decrypt(f"{'9' * 5000} 17") == "?H"

    def test_rsa_custom_key(self, registry):
        engine = registry.get_engine(CipherType.RSA)
        # p=5, q=11: n=55, e=3, d=27
        params = {"n": 55, "e": 3, "d": 27}

        assert engine.decrypt(engine.encrypt("SECRET", params), params) == "SECRET"

    def test_cryptarithm_substitution(self, registry):
        engine = registry.get_engine(CipherType.CRYPTARITHM)

        assert engine.encrypt("send more") == "9567 1085"
        assert engine.decrypt("10652") == "MONEY"
        assert engine.encrypt("DOG", {"mapping": "D=3, O=4"}) == "34G"
