"""Wallet type catalogue and value object."""

from dataclasses import dataclass

from seedvault.domain.secrets.exceptions import InvalidWalletTypeError

WALLET_TYPES: tuple[str, ...] = (
    "AlphaWallet",
    "Argent Wallet",
    "Argent X",
    "Atomic Wallet",
    "Binance Wallet (custodial)",
    "BitBox02",
    "BlueWallet",
    "BRD Wallet (Breadwallet)",
    "Braavos",
    "Brain Wallet (Not Recommended)",
    "Cake Wallet",
    "Coin98 Wallet",
    "Coinbase (custodial)",
    "Coinbase Wallet",
    "Coinomi",
    "Coldcard Mk4",
    "CoolWallet Pro",
    "Core Wallet",
    "Cosmostation Wallet",
    "Crypto.com DeFi Wallet",
    "Daedalus Wallet",
    "Desktop Wallet (Generic)",
    "Edge Wallet",
    "Electrum",
    "Ellipal Titan",
    "Enkrypt",
    "Eternl Wallet",
    "Exodus",
    "Exodus Desktop",
    "Exodus Mobile",
    "Exodus Web3 Wallet",
    "Feather Wallet",
    "Foundation Passport",
    "Frame",
    "Glow",
    "Green Wallet (Blockstream Green)",
    "Guarda Wallet",
    "Hardware Wallet (Generic)",
    "Jaxx Liberty",
    "KeepKey",
    "Keplr Wallet",
    "Keystone Pro (formerly Cobo Vault)",
    "Kraken Wallet (custodial)",
    "Kukai Wallet",
    "Ledger Nano S",
    "Ledger Nano S Plus",
    "Ledger Nano X",
    "Ledger Stax",
    "Loopring Wallet",
    "MathWallet",
    "Metamask",
    "MetaMask Extension",
    "MetaMask Mobile",
    "Mobile Wallet (Generic)",
    "Monero GUI Wallet",
    "Multisig Wallet (Generic)",
    "MyCrypto",
    "MyEtherWallet (MEW)",
    "Nami Wallet",
    "Ngrave Zero",
    "Nunchuk",
    "Other",
    "Paper Wallet",
    "Phantom",
    "Polkadot{.js}",
    "Rabby Wallet",
    "Ronin Wallet",
    "SafePal S1",
    "Safe{Wallet}",
    "Samourai Wallet",
    "SeedSigner",
    "Software Wallet (Generic)",
    "Solflare",
    "Sparrow Wallet",
    "SubWallet",
    "Talisman",
    "Temple Wallet",
    "Terra Station",
    "Trezor Model One",
    "Trezor Model T",
    "Trezor Safe 3",
    "TronLink",
    "Trust Wallet",
    "Trust Wallet Mobile",
    "Wasabi Wallet",
    "Web Wallet (Generic)",
    "XDEFI Wallet",
    "Yoroi Wallet",
    "Zelcore",
)

_WALLET_TYPE_SET = frozenset(WALLET_TYPES)


@dataclass(frozen=True)
class WalletType:
    """A wallet or product name from the closed catalogue."""

    value: str

    def __post_init__(self) -> None:
        if self.value not in _WALLET_TYPE_SET:
            raise InvalidWalletTypeError(str(self.value))

    @classmethod
    def from_storage(cls, value: str) -> "WalletType":
        """Rebuild a stored type without checking the current catalogue.

        Rows written before an entry left the catalogue still load.
        """
        wallet_type = object.__new__(cls)
        object.__setattr__(wallet_type, "value", value)
        return wallet_type

    def __str__(self) -> str:
        return self.value
