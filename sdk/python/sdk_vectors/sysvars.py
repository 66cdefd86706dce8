"""Sysvar account layouts and the arithmetic that goes with them."""

from dataclasses import dataclass, field

from .codec import BincodeWriter
from .errors import EncodingError

# Serialized sizes of the sysvar accounts
CLOCK_SIZE = 40
RENT_SIZE = 17
EPOCH_SCHEDULE_SIZE = 33
FEES_SIZE = 8
SLOT_HASHES_MAX_ENTRIES = 512
SLOT_HASHES_SIZE = 8 + SLOT_HASHES_MAX_ENTRIES * (8 + 32)
STAKE_HISTORY_MAX_ENTRIES = 512
STAKE_HISTORY_SIZE = 8 + STAKE_HISTORY_MAX_ENTRIES * (8 + 3 * 8)
RECENT_BLOCKHASHES_MAX_ENTRIES = 150
RECENT_BLOCKHASHES_SIZE = 8 + RECENT_BLOCKHASHES_MAX_ENTRIES * (32 + 8)
SLOT_HISTORY_MAX_ENTRIES = 1024 * 1024
SLOT_HISTORY_WORDS = SLOT_HISTORY_MAX_ENTRIES // 64
SLOT_HISTORY_SIZE = 1 + 8 + SLOT_HISTORY_WORDS * 8 + 8 + 8
EPOCH_REWARDS_SIZE = 81
LAST_RESTART_SLOT_SIZE = 8

DEFAULT_LAMPORTS_PER_BYTE_YEAR = 3480
DEFAULT_EXEMPTION_THRESHOLD = 2.0
DEFAULT_BURN_PERCENT = 50
ACCOUNT_STORAGE_OVERHEAD = 128

MINIMUM_SLOTS_PER_EPOCH = 32
DEFAULT_SLOTS_PER_EPOCH = 432_000
DEFAULT_LEADER_SCHEDULE_SLOT_OFFSET = DEFAULT_SLOTS_PER_EPOCH
MAX_LEADER_SCHEDULE_EPOCH_OFFSET = 3


@dataclass
class Clock:
    slot: int = 0
    epoch_start_timestamp: int = 0
    epoch: int = 0
    leader_schedule_epoch: int = 0
    unix_timestamp: int = 0

    def serialize(self) -> bytes:
        return (
            BincodeWriter()
            .u64(self.slot)
            .i64(self.epoch_start_timestamp)
            .u64(self.epoch)
            .u64(self.leader_schedule_epoch)
            .i64(self.unix_timestamp)
            .to_bytes()
        )


@dataclass
class Rent:
    lamports_per_byte_year: int = DEFAULT_LAMPORTS_PER_BYTE_YEAR
    exemption_threshold: float = DEFAULT_EXEMPTION_THRESHOLD
    burn_percent: int = DEFAULT_BURN_PERCENT

    def minimum_balance(self, data_len: int) -> int:
        """Lamports needed for an account of ``data_len`` bytes to be rent exempt."""
        bytes_ = ACCOUNT_STORAGE_OVERHEAD + data_len
        if self.exemption_threshold == 2.0:
            return bytes_ * self.lamports_per_byte_year * 2
        return int(bytes_ * self.lamports_per_byte_year * self.exemption_threshold)

    def is_exempt(self, lamports: int, data_len: int) -> bool:
        return lamports >= self.minimum_balance(data_len)

    def serialize(self) -> bytes:
        return (
            BincodeWriter()
            .u64(self.lamports_per_byte_year)
            .f64(self.exemption_threshold)
            .u8(self.burn_percent)
            .to_bytes()
        )


def _trailing_zeros(n: int) -> int:
    return (n & -n).bit_length() - 1


def _next_power_of_two(n: int) -> int:
    return 1 if n <= 1 else 1 << (n - 1).bit_length()


@dataclass
class EpochSchedule:
    """Slot/epoch arithmetic, including the power-of-two warmup period."""

    slots_per_epoch: int
    leader_schedule_slot_offset: int
    warmup: bool
    first_normal_epoch: int = 0
    first_normal_slot: int = 0

    @classmethod
    def custom(cls, slots_per_epoch: int, leader_schedule_slot_offset: int, warmup: bool) -> "EpochSchedule":
        if slots_per_epoch < MINIMUM_SLOTS_PER_EPOCH:
            raise EncodingError(f"slots_per_epoch {slots_per_epoch} below minimum {MINIMUM_SLOTS_PER_EPOCH}")
        if warmup:
            next_pow2 = _next_power_of_two(slots_per_epoch)
            log2_slots = max(_trailing_zeros(next_pow2) - _trailing_zeros(MINIMUM_SLOTS_PER_EPOCH), 0)
            first_normal_epoch = log2_slots
            first_normal_slot = max(next_pow2 - MINIMUM_SLOTS_PER_EPOCH, 0)
        else:
            first_normal_epoch, first_normal_slot = 0, 0
        return cls(slots_per_epoch, leader_schedule_slot_offset, warmup, first_normal_epoch, first_normal_slot)

    @classmethod
    def without_warmup(cls) -> "EpochSchedule":
        return cls.custom(DEFAULT_SLOTS_PER_EPOCH, DEFAULT_LEADER_SCHEDULE_SLOT_OFFSET, False)

    def get_slots_in_epoch(self, epoch: int) -> int:
        if epoch < self.first_normal_epoch:
            return 2 ** (epoch + _trailing_zeros(MINIMUM_SLOTS_PER_EPOCH))
        return self.slots_per_epoch

    def get_epoch_and_slot_index(self, slot: int) -> tuple[int, int]:
        if slot < self.first_normal_slot:
            epoch = max(
                _trailing_zeros(_next_power_of_two(slot + MINIMUM_SLOTS_PER_EPOCH + 1))
                - _trailing_zeros(MINIMUM_SLOTS_PER_EPOCH)
                - 1,
                0,
            )
            epoch_len = 2 ** (epoch + _trailing_zeros(MINIMUM_SLOTS_PER_EPOCH))
            return epoch, max(slot - (epoch_len - MINIMUM_SLOTS_PER_EPOCH), 0)
        normal_slot_index = slot - self.first_normal_slot
        normal_epoch_index, slot_index = divmod(normal_slot_index, self.slots_per_epoch)
        return self.first_normal_epoch + normal_epoch_index, slot_index

    def get_epoch(self, slot: int) -> int:
        return self.get_epoch_and_slot_index(slot)[0]

    def get_first_slot_in_epoch(self, epoch: int) -> int:
        if epoch <= self.first_normal_epoch:
            return (2 ** epoch - 1) * MINIMUM_SLOTS_PER_EPOCH
        return (epoch - self.first_normal_epoch) * self.slots_per_epoch + self.first_normal_slot

    def get_last_slot_in_epoch(self, epoch: int) -> int:
        return self.get_first_slot_in_epoch(epoch) + self.get_slots_in_epoch(epoch) - 1

    def get_leader_schedule_epoch(self, slot: int) -> int:
        if slot < self.first_normal_slot:
            return self.get_epoch_and_slot_index(slot)[0] + 1
        new_slots_since_first_normal_slot = slot - self.first_normal_slot
        new_first_normal_leader_schedule_slot = (
            new_slots_since_first_normal_slot + self.leader_schedule_slot_offset
        )
        new_epochs_since_first_normal_leader_schedule = (
            new_first_normal_leader_schedule_slot // self.slots_per_epoch
        )
        return self.first_normal_epoch + new_epochs_since_first_normal_leader_schedule

    def serialize(self) -> bytes:
        return (
            BincodeWriter()
            .u64(self.slots_per_epoch)
            .u64(self.leader_schedule_slot_offset)
            .boolean(self.warmup)
            .u64(self.first_normal_epoch)
            .u64(self.first_normal_slot)
            .to_bytes()
        )


@dataclass
class SlotHashes:
    entries: list[tuple[int, bytes]] = field(default_factory=list)

    def serialize(self) -> bytes:
        if len(self.entries) > SLOT_HASHES_MAX_ENTRIES:
            raise EncodingError(f"slot hashes hold at most {SLOT_HASHES_MAX_ENTRIES} entries")
        w = BincodeWriter().length(len(self.entries))
        for slot, hash_ in self.entries:
            w.u64(slot).raw(hash_)
        return w.to_bytes()


@dataclass
class EpochRewards:
    distribution_starting_block_height: int = 0
    num_partitions: int = 0
    parent_blockhash: bytes = bytes(32)
    total_points: int = 0
    total_rewards: int = 0
    distributed_rewards: int = 0
    active: bool = False

    def serialize(self) -> bytes:
        return (
            BincodeWriter()
            .u64(self.distribution_starting_block_height)
            .u64(self.num_partitions)
            .raw(self.parent_blockhash)
            .u128(self.total_points)
            .u64(self.total_rewards)
            .u64(self.distributed_rewards)
            .boolean(self.active)
            .to_bytes()
        )


@dataclass
class LastRestartSlot:
    last_restart_slot: int = 0

    def serialize(self) -> bytes:
        return BincodeWriter().u64(self.last_restart_slot).to_bytes()
