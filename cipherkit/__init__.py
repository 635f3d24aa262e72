from .affine import affine_decrypt, affine_encrypt
from .alphabet import letter_to_number, normalize_text, number_to_letter
from .arithmetic import gcd, mod, mod_inverse
from .errors import (CipherError, EmptyKeyError, EmptyTextError, InvalidMatrixError,
                     LengthMismatchError, NoModularInverseError, NonCoprimeKeyError,
                     NonInvertibleMatrixError)
from .hill import hill_decrypt, hill_encrypt, parse_hill_key
from .matrix import adjugate, determinant, invert_matrix, multiply
from .playfair import (PlayfairCipher, build_matrix, find_position, playfair_decrypt,
                       playfair_encrypt, prepare_plaintext)
from .super_encryption import super_decrypt, super_encrypt
from .transposition import inverse_transpose, transpose
from .vigenere import (autokey_decrypt, autokey_encrypt, extended_decrypt, extended_encrypt,
                       vigenere_decrypt, vigenere_encrypt)

__version__ = "1.0.0"
