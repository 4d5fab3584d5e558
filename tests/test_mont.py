import random

import pytest

from uint256kit.fp256 import Fp256
from uint256kit.mont import MontContext, invert_limb

# (r, a, N) with r = a^2 * 2^-256 mod N
MONT_SQR_VECTORS = [
    ("1", "fffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffe",
     "ffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffff"),
    ("29082b62c6f58c4aa57d477dd7c40c6bc56ce9ab182420e40", "2595e14b9f48eb8d7",
     "3268de6e20a15cf8d036718837663491d065d304ab3fdd79f"),
    ("b0e01baafbfa3ce992578d1f274de4f6cc2d744e0064ad115b3ad", "7a9e5f61985301a3128a0e48dca",
     "1396d6f1099aab79c73289be595905ad172d8ed0396a3065be62cc3"),
    ("fb100fb3182d1062003ec4e4b5bdb70058b452bffc1c2e65bab", "394699bb35c5f4e32376025a243cbf9d",
     "3d7690fe87d47c1dc3124b8ff3a5b3cfab1a6268812a67a4c7f1"),
    ("148f82f74749b7859f40c1c0b05abf4cc4bc988c4adf1b459ad455297",
     "16d4013d7685d8bdac23972f1488044b3d87f74",
     "1876fd9051f39024a10c53bce68a57cb6191b379f98beb0c973c01c5d"),
    ("5c50b70f167c5ca50a69c0dacf754cbd8dada9f7a37f28ecfc0a3e017d69", "1",
     "1cfb8f4f2a2104de194863e6f96a094fe66f5632f2cb550b4342d674561c5"),
    ("6ca20c2a42d840ae20324825c85f49303aa1311d92209f232c9e654538e7633",
     "16f786d9b70a7593e130125003da29d1b0e19a394df483aa3af73b9db3f4b94",
     "fdeddf44e238aec2a481f036627a0e3b7687a111c9e7bde437db011ad415213"),
    ("1f5863ec3b67d08a59774ff51160a9315000b3472658d6a17e",
     "281a1c429979e8a5fabbdee9ed84167b75a11c5c3020f3601b",
     "34c3f03941bda741f9c8833ddd012f96d8f3aa2391250789d5"),
    ("be8a2b9e157006d668f201fc4812fa85e21b01d053efff78fcb91d68851da7",
     "fdccac6dad21c3d69e8cfd790b9a9f9f4f7062ff2f908e11834005c",
     "17ac998477136ec99b42b35d930bc60adc35d19c5d6e944380583f73b2b35b7"),
    ("6c5c4a92adeed96a41362031cfde7f40458064bc24d13b6ae1e23e60f268997",
     "2c4ca344647557190a414d062a3f74",
     "71374d0d4bd53ac9baa9518fd8d05d6d134d6310a321b5f12a50fdd5be90a457"),
    ("76a18445d5814b53d51ca1d1bb837eb3ea57c0ab9a22e8fb6cd77d9e0c7",
     "61484a0bc9cc9c976b83614be8a7ca21d8a50f732fc129ffe387d38125a",
     "e85615144b0e54a826ec0ebdc41359e5c06e719d660cdb4056e78c01d79"),
    ("574d52ff913b52d4550462ee7fd0ae6eb55f6c9169c553d8efc17e09d46d451",
     "ad2eac3192caab92b21a9f6",
     "2daf4ed7acc717aea8c36efe7c04750e236424ed36b0542c357d03673e953027"),
    ("58d2cb5e2048d19d6b44742a315c7f83e5a43adca7ab396c01bbbf96e569495", "ac",
     "88fe44a2ed84f363459d02fcf3cfe4328d88608e6d1f6621d925056cb94f535"),
    ("47c884c2fb4a064b12bbc4e4dc90c258260d110231c16ea0a10d8b4bbed45a4", "afcfb",
     "683c2cd777d05181f815281070b78ec9a61c2a8e75e891c26a9c05817e6ce7b"),
    ("1b9d62dcbee8c4ec439645efd61043997bf8e388ec8104bb9", "11b4b9215087",
     "b325b8754246c2f6a411ad2ab1057fca7e725ff7a4544b52d"),
    ("3de6b1bce21c22638926dc82d1ddfd6cb1444d954ba1b03a559143",
     "29d924c6f871bd76939daadc48df90a1b01578e09ac8be54c8e0aa4",
     "2b8c582cd46f591c8aca06b7a7394274260cd4f944ff2b40d7ca321"),
    ("286ba72d9c06c9b8175100d8b439eed1012ece391ec832db565f423255d",
     "5a6e859fbbf8416fd6e76c9bedc6d767950970e9",
     "10bbb2cf7f02856b1330ce5fc57167c4a214b9712cdb49398583490dcb83"),
    ("84836efc08cb889f595ad117dbdc8e53aff90f5b4af4bce5e177dd",
     "84613b6aaeaafe468baa6fec7935f03630e0526f17db8716dffe9a",
     "7e76fa39efdefe49a9fb40b3ffa7a6debed2d9defc007066a15b313"),
    ("f6089113e3f082db0ad58c7c2bc23c3f56593301c6dcab4abfea64cc0252c", "2",
     "c4cf6a958d5a8cc71e1c0847a95fb57e7468fdc2dc1a90055303271a631ef3"),
    ("aeba95f0ba328ccdc8b83f8fdaa222c54e21de1a552e69190ef0b68427f3d5e8",
     "9bac1dbf577e737b76f220035cf071ead1f357a7fd9db31702c76123808695",
     "c6b309ddec4e3e514bc7b2cc24ae5b23c40bef092a6e141c56d9de07b5e42a5d"),
]

# (r, A, B, N) with r = A * B * 2^-(64 * limbs(N)) mod N
MONT_MUL_VECTORS = [
    ("1", "fffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffe",
     "fffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffe",
     "ffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffffff"),
    ("0", "0", "fffffffffffffffffffffffffffffffffff",
     "fffffffffffffffffffffffffffffffffffffffffffffffffffffffff1"),
    ("b", "b", "1", "f"),
    ("320f784489526071312", "3c1a0222373a46b8f94", "3fc5dea501056ff0669", "5d1ca0cb8500169f9b3"),
    ("349746e3009f49d75ef27e24c56de34bf3eaa4", "e02e024379c510564945173444ac3c5afddb2d",
     "fff5a8346b8363808f47b005d9fcc08225d3b1", "1287f0f1ac7dcdd805c3064022cb1c22f371b9f"),
    ("7ecc60237f558948979f16df8c3c2003a22c3e1cd7aa6d9973b35e72f35b",
     "520c901bc22fc73ac2becbaa154610bfd8d4c22e55f1f2af987a289e1bf9",
     "41d587371a78a76eb7a8bb4845cb61439cc93ca7596e65e1585c49225037",
     "11566a8623dd635ae90123dda15943374a2c6db8fd9daa9d7fc267f29c73b"),
    ("14f68b6e1bd5c4ac79d049028f86082bb28ad43124efbe2260159a47",
     "f999dc2d77cf5959055f6ef7788ed865fb1d448b00910542959879d",
     "df2fdca378e5a6e12e9d50df30d62ac2b2e0c7a2218c9d042c11910",
     "3248f03e0d2be7cd8c05380e10f97b587cfa75c546cb0e57bbe31ad1"),
    ("e82eb135c3761045c7e5b28f701f6233fc9cb7008", "1ac855882a53fe3cdbe9125e8e87d28f15848159b4",
     "4ac1", "1b7a793a9d6ff20cc5c0751f000380d3657fbbbcc9"),
    ("3016", "1d45", "6e", "506b"),
    ("2", "8", "4", "f"),
    ("12c40741e6c231ca728b0c3068ebee5bd57df0a19572caf84ee4ef84d1f",
     "8e9c853a1c0016e68c942728c5277f2c4b1411f228fc17a0fae0bfcbc6",
     "28494adb414a00213b5e52a97f10d627b039193027aa8824d404615654d",
     "3eafa29f143c39c9f1105661fdc6cda06c57b0b66391005bb6b0b60cc4b"),
    ("fc4c4ec9c43b706ce22073a7920ebd4285f59d3be0805fef3854c",
     "119dbdf77702133ff9f738a04514db6e7fa0ad2f0482f01873d497",
     "10acd783859a3b930b961b3d5f5c1df709d74934a02d234f6a799b",
     "1864f188c5dbca59eac3c97c8667bcb68aba551308f248a8f2eec7"),
    ("269111a7dde2216910b844f0", "8ba706731c586e7b18855f58", "1f2dc657f01afb034",
     "90531ff8d7d8d806a4c9b11d"),
    ("c0e677800fe622249acccd795", "4f99a14a0e1b82b1574936253", "6690ef",
     "d233286d4b43d2a2810433a2b"),
    ("113e9a9ce96a3cb49d0218b9a90be00584f9", "d2e7", "240018aca664e513c5c5bd5d135ec91c68c3",
     "2462a7b491e37f894d290221791274dad5d7"),
    ("bd45635efdbd862c0340dde252a8613cd0195d997393057f78c7c64817178",
     "3cfad9fbe158e2581715000e3f84a5efbba8369d034661a4", "712edd475ccd26e5a95144d07a95de61",
     "36ead0657c16df65317ff3666a2a2d44261b41b42906d0bdc59531c74bc751"),
    ("7201f860310000d69c34acd0de3f892333e181a03ea10b7a7eb66d01e", "918a6326e6d8859e619f8185",
     "fe88f0be4ad7beb64f", "a51a32f5b02587384723f8c3cdaa3a51f9b1a46a34a42e4d2e88f7317"),
]


@pytest.mark.parametrize("r, a, n", MONT_SQR_VECTORS)
def test_mont_sqr_vectors(r, a, n):
    ctx = MontContext(Fp256.from_hex(n), 4)
    assert ctx.sqr(Fp256.from_hex(a)) == Fp256.from_hex(r)


@pytest.mark.parametrize("r, a, b, n", MONT_MUL_VECTORS)
def test_mont_mul_vectors(r, a, b, n):
    modulus = Fp256.from_hex(n)
    ctx = MontContext(modulus, modulus.nlimbs())
    assert ctx.mul(Fp256.from_hex(a), Fp256.from_hex(b)) == Fp256.from_hex(r)


def test_random_mont_sqr_round_trip():
    rng = random.Random(2021)
    for _ in range(200):
        n = rng.getrandbits(256) | 1
        a = Fp256(rng.getrandbits(64 * rng.randint(1, 4)) % n)
        ctx = MontContext(Fp256(n), 4)
        assert (ctx.k0 * n + 1) % (1 << 64) == 0
        big_a = ctx.to_mont(a)
        assert ctx.from_mont(big_a) == a
        squared = ctx.sqr(big_a)
        assert squared == ctx.mul(big_a, big_a)
        assert ctx.from_mont(squared) == Fp256(a.value * a.value % n)


def test_invert_limb_values():
    assert invert_limb(1) == 0xFFFFFFFFFFFFFFFF
    assert invert_limb(3) == 0x5555555555555555
    with pytest.raises(ValueError):
        invert_limb(2)
    with pytest.raises(ValueError):
        invert_limb(1 << 64)


def test_context_rr_value():
    assert MontContext(Fp256(7), 4).rr == Fp256(4)
    assert MontContext(Fp256(15), 1).rr == Fp256(1)


def test_context_rejects_bad_arguments():
    with pytest.raises(ValueError):
        MontContext(Fp256(10), 4)
    with pytest.raises(ValueError):
        MontContext(Fp256(0), 4)
    with pytest.raises(ValueError):
        MontContext(Fp256(7), 0)
    with pytest.raises(ValueError):
        MontContext(Fp256(7), 5)


def test_exp_small_values():
    ctx = MontContext(Fp256(1000003), 4)
    base = ctx.to_mont(Fp256(3))
    assert ctx.from_mont(ctx.exp(base, Fp256(5))) == Fp256(243)
    assert ctx.from_mont(ctx.exp(base, Fp256(0))) == Fp256(1)


def test_exp_fermat_little_theorem():
    p = (1 << 255) - 19
    ctx = MontContext(Fp256(p), 4)
    base = ctx.to_mont(Fp256(123456789))
    assert ctx.from_mont(ctx.exp(base, Fp256(p - 1))) == Fp256(1)