# chip8_core/instructions/maps.py
"""
オペコードと命令実装のマッピング定義。
"""
from chip8_core.core.snapshot import Instruction as I
from . import alu
from . import control
from . import display
from . import load

# @intent:map 上位ニブルのみで命令が確定するオペコード。
PRIMARY_MAP = {
    0x1: I.JP,
    0x2: I.CALL,
    0x3: I.SE_BYTE,
    0x4: I.SNE_BYTE,
    0x6: I.LD_BYTE,
    0x7: I.ADD_BYTE,
    0xA: I.LD_I,
    0xB: I.JP_V0,
    0xC: I.RND,
    0xD: I.DRW,
}

# @intent:map 上位ニブルから（サブキーのマスク, サブキー→命令）へのマッピング。
# @intent:rationale 0x0系は下位12ビット、0x5/0x8/0x9系は下位ニブル、0xE/0xF系は下位バイトでサブディスパッチする。
SECONDARY_MAP = {
    0x0: (0x0FFF, {
        0x0E0: I.CLS,
        0x0EE: I.RET,
    }),
    0x5: (0x000F, {
        0x0: I.SE_REG,
    }),
    0x8: (0x000F, {
        0x0: I.LD_REG,
        0x1: I.OR,
        0x2: I.AND,
        0x3: I.XOR,
        0x4: I.ADD_REG,
        0x5: I.SUB,
        0x6: I.SHR,
        0x7: I.SUBN,
        0xE: I.SHL,
    }),
    0x9: (0x000F, {
        0x0: I.SNE_REG,
    }),
    0xE: (0x00FF, {
        0x9E: I.SKP,
        0xA1: I.SKNP,
    }),
    0xF: (0x00FF, {
        0x07: I.LD_VX_DT,
        0x0A: I.LD_VX_K,
        0x15: I.LD_DT_VX,
        0x18: I.LD_ST_VX,
        0x1E: I.ADD_I_VX,
        0x29: I.LD_F_VX,
        0x33: I.LD_B_VX,
        0x55: I.LD_MEM_VX,
        0x65: I.LD_VX_MEM,
    }),
}

# @intent:map 命令ごとのアセンブリ表記（ニーモニックとオペランドの書式）。
# オペランド書式中の{x},{y},{n},{nn},{nnn}はデコード時にフィールド値で置換される。
SYNTAX_MAP = {
    I.CLS: ("CLS", []),
    I.RET: ("RET", []),
    I.JP: ("JP", ["${nnn:03X}"]),
    I.CALL: ("CALL", ["${nnn:03X}"]),
    I.SE_BYTE: ("SE", ["V{x:X}", "#{nn:02X}"]),
    I.SNE_BYTE: ("SNE", ["V{x:X}", "#{nn:02X}"]),
    I.SE_REG: ("SE", ["V{x:X}", "V{y:X}"]),
    I.LD_BYTE: ("LD", ["V{x:X}", "#{nn:02X}"]),
    I.ADD_BYTE: ("ADD", ["V{x:X}", "#{nn:02X}"]),
    I.LD_REG: ("LD", ["V{x:X}", "V{y:X}"]),
    I.OR: ("OR", ["V{x:X}", "V{y:X}"]),
    I.AND: ("AND", ["V{x:X}", "V{y:X}"]),
    I.XOR: ("XOR", ["V{x:X}", "V{y:X}"]),
    I.ADD_REG: ("ADD", ["V{x:X}", "V{y:X}"]),
    I.SUB: ("SUB", ["V{x:X}", "V{y:X}"]),
    I.SHR: ("SHR", ["V{x:X}"]),
    I.SUBN: ("SUBN", ["V{x:X}", "V{y:X}"]),
    I.SHL: ("SHL", ["V{x:X}"]),
    I.SNE_REG: ("SNE", ["V{x:X}", "V{y:X}"]),
    I.LD_I: ("LD", ["I", "${nnn:03X}"]),
    I.JP_V0: ("JP", ["V0", "${nnn:03X}"]),
    I.RND: ("RND", ["V{x:X}", "#{nn:02X}"]),
    I.DRW: ("DRW", ["V{x:X}", "V{y:X}", "{n}"]),
    I.SKP: ("SKP", ["V{x:X}"]),
    I.SKNP: ("SKNP", ["V{x:X}"]),
    I.LD_VX_DT: ("LD", ["V{x:X}", "DT"]),
    I.LD_VX_K: ("LD", ["V{x:X}", "K"]),
    I.LD_DT_VX: ("LD", ["DT", "V{x:X}"]),
    I.LD_ST_VX: ("LD", ["ST", "V{x:X}"]),
    I.ADD_I_VX: ("ADD", ["I", "V{x:X}"]),
    I.LD_F_VX: ("LD", ["F", "V{x:X}"]),
    I.LD_B_VX: ("LD", ["B", "V{x:X}"]),
    I.LD_MEM_VX: ("LD", ["[I]", "V{x:X}"]),
    I.LD_VX_MEM: ("LD", ["V{x:X}", "[I]"]),
}

# @intent:map 命令から実行関数へのマッピングテーブル。
EXECUTE_MAP = {
    # Display
    I.CLS: display.execute_cls,
    I.DRW: display.execute_drw,

    # Control
    I.RET: control.execute_ret,
    I.JP: control.execute_jp,
    I.CALL: control.execute_call,
    I.SE_BYTE: control.execute_se_byte,
    I.SNE_BYTE: control.execute_sne_byte,
    I.SE_REG: control.execute_se_reg,
    I.SNE_REG: control.execute_sne_reg,
    I.JP_V0: control.execute_jp_v0,
    I.SKP: control.execute_skp,
    I.SKNP: control.execute_sknp,

    # Load
    I.LD_BYTE: load.execute_ld_byte,
    I.LD_REG: load.execute_ld_reg,
    I.LD_I: load.execute_ld_i,
    I.LD_VX_DT: load.execute_ld_vx_dt,
    I.LD_VX_K: load.execute_ld_vx_k,
    I.LD_DT_VX: load.execute_ld_dt_vx,
    I.LD_ST_VX: load.execute_ld_st_vx,
    I.LD_F_VX: load.execute_ld_f_vx,
    I.LD_B_VX: load.execute_ld_b_vx,
    I.LD_MEM_VX: load.execute_ld_mem_vx,
    I.LD_VX_MEM: load.execute_ld_vx_mem,

    # ALU
    I.ADD_BYTE: alu.execute_add_byte,
    I.OR: alu.execute_or,
    I.AND: alu.execute_and,
    I.XOR: alu.execute_xor,
    I.ADD_REG: alu.execute_add_reg,
    I.SUB: alu.execute_sub,
    I.SHR: alu.execute_shr,
    I.SUBN: alu.execute_subn,
    I.SHL: alu.execute_shl,
    I.RND: alu.execute_rnd,
    I.ADD_I_VX: alu.execute_add_i_vx,
}
