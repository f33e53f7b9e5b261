"""Solidity contracts that perform Groth16 proof verification."""

import re
from dataclasses import dataclass

from zksolidity.config import GeneratorConfig
from zksolidity.exceptions import InvalidContractNameError
from zksolidity.groth16.points import FormattedG1Point, FormattedG2Point, format_g1_point, format_g2_point
from zksolidity.types.verifying_key import Groth16VerifyingKeyDescriptor
from zksolidity.util.source_builder import Section, SectionWriter, render_sections

SOLIDITY_IDENTIFIER = re.compile(r"[A-Za-z_$][A-Za-z0-9_$]*")


@dataclass(frozen=True)
class VerifierContractSource:
    """Source of a generated verifier contract.

    Attributes:
        contract_name (str): Name of the contract.
        file_name (str): Name of the file in which the source is written, `<contract_name>.<extension>`.
        sections (tuple[Section, ...]): The sections the source is made of.
        text (str): The rendered source.
    """

    contract_name: str
    file_name: str
    sections: tuple[Section, ...]
    text: str

    def section(self, name: str) -> Section:
        """Return the section called `name`."""
        for section in self.sections:
            if section.name == name:
                return section
        msg = f"No section called {name} in {self.file_name}"
        raise KeyError(msg)


def check_contract_name(contract_name: str) -> str:
    """Check that `contract_name` is a valid Solidity identifier and return it."""
    if not isinstance(contract_name, str) or not SOLIDITY_IDENTIFIER.fullmatch(contract_name):
        msg = f"The contract name must be a Solidity identifier: contract_name: {contract_name!r}"
        raise InvalidContractNameError(msg)
    return contract_name


def g1_point_constructor(point: FormattedG1Point) -> list[str]:
    """Lines of a `Pairing.G1Point(...)` expression, without the trailing `;`."""
    return ["Pairing.G1Point(", f"    {point.x},", f"    {point.y}", ")"]


def g2_point_constructor(point: FormattedG2Point) -> list[str]:
    """Lines of a `Pairing.G2Point(...)` expression, without the trailing `;`."""
    return [
        "Pairing.G2Point(",
        "    [",
        f"        {point.x[0]},",
        f"        {point.x[1]}",
        "    ],",
        "    [",
        f"        {point.y[0]},",
        f"        {point.y[1]}",
        "    ]",
        ")",
    ]


def assignment(target: str, expression: list[str]) -> list[str]:
    """Lines assigning a multi-line `expression` to `target`."""
    return [f"{target} = {expression[0]}", *expression[1:-1], f"{expression[-1]};"]


class Groth16SolidityVerifier:
    """Generator of Solidity Groth16 verifiers.

    The generated contract hard codes the verifying key and delegates verification to the `Groth16` and
    `Pairing` Solidity libraries.

    Attributes:
        config (GeneratorConfig): Settings of the generated source (version, license, import paths).
    """

    def __init__(self, config: GeneratorConfig | None = None):
        """Initialise the generator.

        Args:
            config (GeneratorConfig | None): Settings of the generated source. Defaults to `GeneratorConfig()`.
        """
        self.config = config if config is not None else GeneratorConfig()

    def ic_assignments(self, verifying_key: Groth16VerifyingKeyDescriptor) -> list[list[str]]:
        """Assignments of the input commitments, `vk.IC[i] = Pairing.G1Point(...)`, one per element of `ic`.

        The elements are assigned in the order of the verifying key.
        """
        return [
            assignment(f"vk.IC[{i}]", g1_point_constructor(format_g1_point(point)))
            for i, point in enumerate(verifying_key.ic)
        ]

    def verifying_key_assignments(self, verifying_key: Groth16VerifyingKeyDescriptor) -> list[list[str]]:
        """Groups of lines making up the body of the `verifyingKey()` function, separated by blank lines.

        Returns:
            Three groups: the assignment of `vk.alpha1`; the assignments of `vk.beta2`, `vk.gamma2`,
            `vk.delta2` followed by the allocation of `vk.IC`; the assignments of the elements of `vk.IC`.
        """
        g2_points = []
        for name, point in (
            ("vk.beta2", verifying_key.beta_2),
            ("vk.gamma2", verifying_key.gamma_2),
            ("vk.delta2", verifying_key.delta_2),
        ):
            g2_points.extend(assignment(name, g2_point_constructor(format_g2_point(point))))
        g2_points.append(f"vk.IC = new Pairing.G1Point[]({len(verifying_key.ic)});")

        return [
            assignment("vk.alpha1", g1_point_constructor(format_g1_point(verifying_key.alpha_1))),
            g2_points,
            [line for lines in self.ic_assignments(verifying_key) for line in lines],
        ]

    def __header(self) -> Section:
        header = SectionWriter("header")
        header.line(f"// SPDX-License-Identifier: {self.config.license}")
        header.line(f"pragma solidity {self.config.solidity_version};")
        return header.build()

    def __imports(self, contract_name: str) -> Section:
        libs = self.config.libs_import_path.rstrip("/")
        interfaces = self.config.interfaces_import_path.rstrip("/")
        imports = SectionWriter("imports")
        imports.line(f'import {{Pairing}} from "{libs}/Pairing.sol";')
        imports.line(f'import {{Groth16}} from "{libs}/Groth16.sol";')
        imports.line(f'import {{I{contract_name}}} from "{interfaces}/I{contract_name}.sol";')
        return imports.build()

    def __verifying_key(self, verifying_key: Groth16VerifyingKeyDescriptor) -> Section:
        function = SectionWriter("verifying_key", depth=1, spaced=False)
        opener = [
            "function verifyingKey()",
            "    internal",
            "    pure",
            "    returns (Groth16.VerifyingKey memory vk)",
            "{",
        ]
        with function.block(opener, "}"):
            for ix, lines in enumerate(self.verifying_key_assignments(verifying_key)):
                if ix > 0:
                    function.blank()
                function.lines(lines)
        return function.build()

    def __verify_proof(self) -> Section:
        function = SectionWriter("verify_proof", depth=1)
        function.line("/// @return r bool true if proof is valid")
        opener = [
            "function verifyProof(",
            "    uint256[8] memory proof,",
            "    uint256[] memory pi",
            ") public view override returns (bool r) {",
        ]
        with function.block(opener, "}"):
            function.line("return Groth16.verifyProof(verifyingKey(), proof, pi);")
        return function.build()

    def __batch_verify_proofs(self) -> Section:
        function = SectionWriter("batch_verify_proofs", depth=1)
        function.line("/// @return r bool true if proofs are valid")
        opener = [
            "function batchVerifyProofs(",
            "    uint256[8][] memory proofs,",
            "    uint256[][] memory allPis",
            ") public view override returns (bool) {",
        ]
        with function.block(opener, "}"):
            function.line("return Groth16.batchVerifyProofs(verifyingKey(), proofs, allPis);")
        return function.build()

    def sections(self, verifying_key: Groth16VerifyingKeyDescriptor, contract_name: str) -> list[Section]:
        """Return the sections of the verifier contract, in order."""
        check_contract_name(contract_name)

        contract_open = SectionWriter("contract_open")
        contract_open.line(f"contract {contract_name} is I{contract_name} {{")
        contract_close = SectionWriter("contract_close", spaced=False)
        contract_close.line("}")

        return [
            self.__header(),
            self.__imports(contract_name),
            contract_open.build(),
            self.__verifying_key(verifying_key),
            self.__verify_proof(),
            self.__batch_verify_proofs(),
            contract_close.build(),
        ]

    def verifier_contract(
        self, verifying_key: Groth16VerifyingKeyDescriptor, contract_name: str
    ) -> VerifierContractSource:
        """Generate the Solidity source of a Groth16 verifier.

        Args:
            verifying_key (Groth16VerifyingKeyDescriptor): The verifying key hard coded in the contract.
            contract_name (str): Name of the contract. The contract implements the interface
                `I<contract_name>`.

        Returns:
            The source of a contract exposing:
                - `verifyProof(uint256[8] proof, uint256[] pi)`, which returns
                    `Groth16.verifyProof(verifyingKey(), proof, pi)`
                - `batchVerifyProofs(uint256[8][] proofs, uint256[][] allPis)`, which returns
                    `Groth16.batchVerifyProofs(verifyingKey(), proofs, allPis)`

        Raises:
            InvalidContractNameError: If `contract_name` is not a Solidity identifier.
        """
        sections = self.sections(verifying_key, contract_name)
        return VerifierContractSource(
            contract_name=contract_name,
            file_name=f"{contract_name}.{self.config.source_extension}",
            sections=tuple(sections),
            text=render_sections(sections),
        )
