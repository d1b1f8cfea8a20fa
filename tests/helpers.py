"""
In-memory forked node used by the test fixtures.

FakeNode models just enough of a hardhat fork for the liquidity flows:
account impersonation, ETH balances, ERC20 balances/allowances and the
Uniswap V2 Router02 addLiquidityETH/removeLiquidityETH accounting. Every
RPC method and transaction is appended to `node.calls` so tests can assert
ordering.
"""

import time
from web3 import Web3
from web3.datastructures import AttributeDict
from web3.exceptions import ContractLogicError

ROUTER = Web3.to_checksum_address("0x7a250d5630B4cF539739dF2C5dAcb4c659F2488D")
USDC = Web3.to_checksum_address("0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48")
HOLDER = Web3.to_checksum_address("0xf584F8728B874a6a5c7A8d4d387C9aae9172D621")
PAIR = Web3.to_checksum_address("0xB4e16d0168e52d35CaCD2c6185b44281Ec28C9Dc")

ETH = 10 ** 18
USDC_UNIT = 10 ** 6


class FakeToken:
    def __init__(self, symbol, decimals, total_supply=0):
        self.symbol = symbol
        self.decimals = decimals
        self.total_supply = total_supply
        self.balances = {}
        self.allowances = {}

    def balance(self, owner):
        return self.balances.get(owner, 0)


class FakeNode:
    GAS_USED = 150_000
    GAS_PRICE = 10 ** 9  # 1 gwei

    def __init__(self):
        self.calls = []
        self.impersonated = set()
        self.reject_impersonation = False
        self.fail = set()
        self.receipt_status = 1
        self.block_number = 19_000_000
        self.receipts = {}

        self.eth = {HOLDER.lower(): 10 * ETH}
        self.usdc = FakeToken("USDC", 6)
        self.usdc.balances[HOLDER.lower()] = 1_000 * USDC_UNIT
        self.lp = FakeToken("UNI-V2", 18, total_supply=4 * 10 ** 16)
        self.tokens = {USDC.lower(): self.usdc, PAIR.lower(): self.lp}

        # 2000 USDC per ETH
        self.reserve_token = 2_000_000 * USDC_UNIT
        self.reserve_eth = 1_000 * ETH

    @property
    def methods(self):
        return [name for name, _, _ in self.calls]

    def args_of(self, method):
        return [args for name, args, _ in self.calls if name == method]

    # -- RPC -------------------------------------------------------------

    def make_request(self, method, params):
        self.calls.append((method, tuple(params), None))
        if method != "hardhat_impersonateAccount":
            return {"jsonrpc": "2.0", "id": 1, "error": {"code": -32601, "message": "method not found"}}
        if self.reject_impersonation:
            return {"jsonrpc": "2.0", "id": 1, "error": {"code": -32603, "message": "impersonation disabled"}}
        self.impersonated.add(params[0].lower())
        return {"jsonrpc": "2.0", "id": 1, "result": True}

    def get_balance(self, address):
        return self.eth.get(address.lower(), 0)

    def wait_for_transaction_receipt(self, tx_hash):
        return self.receipts[tx_hash]

    # -- contract calls -------------------------------------------------

    def call(self, address, name, args):
        token = self.tokens[address.lower()]
        if name == "symbol":
            return token.symbol
        if name == "decimals":
            return token.decimals
        if name == "balanceOf":
            return token.balance(args[0].lower())
        raise NotImplementedError(name)

    def transact(self, address, name, args, tx):
        sender = tx["from"].lower()
        if sender not in self.impersonated:
            raise ValueError({"code": -32000, "message": f"unknown account {tx['from']}"})

        self.calls.append((name, tuple(args), dict(tx)))
        if name in self.fail:
            raise ContractLogicError(f"execution reverted: {name}")

        value = tx.get("value", 0)
        fee = self.GAS_USED * self.GAS_PRICE
        if self.eth.get(sender, 0) < value + fee:
            raise ValueError({"code": -32003, "message": "insufficient funds for gas * price + value"})

        getattr(self, "_" + name)(address.lower(), sender, args, value)
        self.eth[sender] -= fee

        self.block_number += 1
        tx_hash = self.block_number.to_bytes(32, "big")
        self.receipts[tx_hash] = AttributeDict({
            "status": self.receipt_status,
            "transactionHash": tx_hash,
            "blockNumber": self.block_number,
            "gasUsed": self.GAS_USED,
        })
        return tx_hash

    def _approve(self, address, sender, args, value):
        spender, amount = args
        self.tokens[address].allowances[(sender, spender.lower())] = amount

    def _pull(self, token, owner, amount):
        key = (owner, ROUTER.lower())
        if token.allowances.get(key, 0) < amount:
            raise ContractLogicError("execution reverted: TransferHelper: TRANSFER_FROM_FAILED")
        if token.balance(owner) < amount:
            raise ContractLogicError("execution reverted: TransferHelper: TRANSFER_FROM_FAILED")
        token.allowances[key] -= amount
        token.balances[owner] = token.balance(owner) - amount

    def _addLiquidityETH(self, address, sender, args, value):
        token, desired, token_min, eth_min, to, deadline = args
        if deadline < time.time():
            raise ContractLogicError("execution reverted: UniswapV2Router: EXPIRED")

        eth_optimal = desired * self.reserve_eth // self.reserve_token
        if eth_optimal <= value:
            if eth_optimal < eth_min:
                raise ContractLogicError("execution reverted: UniswapV2Router: INSUFFICIENT_B_AMOUNT")
            amount_token, amount_eth = desired, eth_optimal
        else:
            token_optimal = value * self.reserve_token // self.reserve_eth
            if token_optimal < token_min:
                raise ContractLogicError("execution reverted: UniswapV2Router: INSUFFICIENT_A_AMOUNT")
            amount_token, amount_eth = token_optimal, value

        self._pull(self.usdc, sender, amount_token)
        # value is sent in full, the unused part is refunded
        self.eth[sender] -= amount_eth

        liquidity = min(
            amount_token * self.lp.total_supply // self.reserve_token,
            amount_eth * self.lp.total_supply // self.reserve_eth,
        )
        self.reserve_token += amount_token
        self.reserve_eth += amount_eth
        self.lp.total_supply += liquidity
        recipient = to.lower()
        self.lp.balances[recipient] = self.lp.balance(recipient) + liquidity

    def _removeLiquidityETH(self, address, sender, args, value):
        token, liquidity, token_min, eth_min, to, deadline = args
        if deadline < time.time():
            raise ContractLogicError("execution reverted: UniswapV2Router: EXPIRED")

        amount_token = liquidity * self.reserve_token // self.lp.total_supply
        amount_eth = liquidity * self.reserve_eth // self.lp.total_supply
        if amount_token < token_min:
            raise ContractLogicError("execution reverted: UniswapV2Router: INSUFFICIENT_A_AMOUNT")
        if amount_eth < eth_min:
            raise ContractLogicError("execution reverted: UniswapV2Router: INSUFFICIENT_B_AMOUNT")

        self._pull(self.lp, sender, liquidity)
        self.lp.total_supply -= liquidity
        self.reserve_token -= amount_token
        self.reserve_eth -= amount_eth

        recipient = to.lower()
        self.usdc.balances[recipient] = self.usdc.balance(recipient) + amount_token
        self.eth[recipient] = self.eth.get(recipient, 0) + amount_eth


class FakeCall:
    def __init__(self, node, address, name, args):
        self.node = node
        self.address = address
        self.name = name
        self.args = args

    def call(self):
        return self.node.call(self.address, self.name, self.args)

    def transact(self, tx):
        return self.node.transact(self.address, self.name, self.args, tx)


class FakeFunctions:
    def __init__(self, node, address):
        self._node = node
        self._address = address

    def __getattr__(self, name):
        def bind(*args):
            return FakeCall(self._node, self._address, name, args)
        return bind


class FakeContract:
    def __init__(self, node, address, abi):
        self.address = address
        self.abi = abi
        self.functions = FakeFunctions(node, address)


class FakeEth:
    def __init__(self, node):
        self._node = node

    def get_balance(self, address):
        return self._node.get_balance(address)

    def wait_for_transaction_receipt(self, tx_hash):
        return self._node.wait_for_transaction_receipt(tx_hash)

    def contract(self, address, abi):
        return FakeContract(self._node, address, abi)


class FakeWeb3:
    def __init__(self, node):
        self.provider = node
        self.eth = FakeEth(node)


