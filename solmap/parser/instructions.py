"""
Helpers for turning EVM bytecode into instruction indices.
"""

from solmap.errors import BytecodeDecodeError

PUSH0 = 0x5F
PUSH1 = 0x60
PUSH32 = 0x7F


def hex_to_bytes(bytecode_hex):
    """
    Decode a hex string, with or without a 0x prefix, into bytes.

    Args:
        bytecode_hex (str): Hex encoded bytecode

    Returns:
        bytes: The raw bytecode

    Raises:
        BytecodeDecodeError: If the string is not valid hex, for example
            because it still contains unlinked library placeholders
    """
    bytecode_hex = bytecode_hex.strip()
    if bytecode_hex[:2] in ("0x", "0X"):
        bytecode_hex = bytecode_hex[2:]
    if "__" in bytecode_hex:
        raise BytecodeDecodeError("Bytecode contains unlinked library placeholders")
    try:
        return bytes.fromhex(bytecode_hex)
    except ValueError as e:
        raise BytecodeDecodeError(f"Invalid bytecode hex: {e}") from e


def push_data_length(opcode):
    """Number of immediate bytes following an opcode."""
    if PUSH1 <= opcode <= PUSH32:
        return opcode - PUSH0
    return 0


def get_pc_to_instruction_index_mapping(bytecode):
    """
    Map each instruction's program counter to its sequential index.

    PUSH data bytes are not instructions and get no entry.

    Args:
        bytecode (bytes): Raw bytecode

    Returns:
        dict: Program counter to instruction index
    """
    pc_to_instruction_index = {}
    pc = 0
    instruction_index = 0
    while pc < len(bytecode):
        pc_to_instruction_index[pc] = instruction_index
        pc += 1 + push_data_length(bytecode[pc])
        instruction_index += 1
    return pc_to_instruction_index
