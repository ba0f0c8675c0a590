# ---------------------------------------------------------
# Rail Fence transposition cipher (2 rails)
# ---------------------------------------------------------
# Letters are not substituted, only reordered:
#   THYSECRET  ->  rail 1: T Y E R T
#                  rail 2:  H S C E
#   ciphertext = rail 1 + rail 2 = TYERTHSCE
# ---------------------------------------------------------

from .errors import EmptyInputError


def railfence_encrypt(plaintext):
    """Even positions first, then odd positions."""
    if not plaintext:
        raise EmptyInputError("given empty string")
    return plaintext[0::2] + plaintext[1::2]


def railfence_decrypt(ciphertext):
    """
    Splits the ciphertext in the middle (first half gets the extra letter
    when the length is odd) and takes one letter from each half in turn.
    """
    if not ciphertext:
        raise EmptyInputError("given empty string")
    split = (len(ciphertext) + 1) // 2
    top, bottom = ciphertext[:split], ciphertext[split:]

    res = []
    for i in range(len(ciphertext)):
        if i % 2 == 0:
            res.append(top[i // 2])
        else:
            res.append(bottom[i // 2])
    return "".join(res)


if __name__ == "__main__":
    pt = "THYSECRETISTHYPRISONERIFTHOULETITGOTHOUARTAPRISONERTOIT"
    ct = railfence_encrypt(pt)
    print("Plaintext: ", pt)
    print("Encrypted: ", ct)
    print("Decrypted: ", railfence_decrypt(ct))
